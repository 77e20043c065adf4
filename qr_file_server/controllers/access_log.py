import logging
import time

from fastapi import Request, Response

logger = logging.getLogger("qr_file_server.access")


async def log_request(request: Request, call_next) -> Response:
    """
    Записывает в журнал каждый обработанный запрос и добавляет время обработки в заголовки ответа.

    :param request: Запрос для обработки.
    :param call_next: Следующий вызов.
    :return: Ответ на запрос.
    """
    start_time = time.perf_counter()
    response: Response = await call_next(request)
    process_time = round((time.perf_counter() - start_time) * 1000, 4)
    response.headers["Server-Timing"] = f"app;dur={process_time}"

    client: str = f"{request.client.host}:{request.client.port}" if request.client else "-"
    logger.info(
        '%s "%s %s" %d %s %.4fms',
        client,
        request.method,
        request.url.path,
        response.status_code,
        response.headers.get("content-length", "-"),
        process_time
    )
    return response
