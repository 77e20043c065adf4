import ipaddress
import logging
import socket
from typing import Optional

from qr_file_server.algorithms.exceptions import LocalAddressNotFound

logger = logging.getLogger(__name__)

# Public resolvers, used only to pick the outgoing interface; nothing is sent to them
PROBE_TARGETS: tuple[tuple[socket.AddressFamily, str], ...] = (
    (socket.AF_INET, "8.8.8.8"),
    (socket.AF_INET6, "2001:4860:4860::8888"),
)


def is_usable_address(address: str) -> bool:
    """
    Проверяет, что адрес может быть использован устройствами в локальной сети.

    :param address: Строковое представление IP-адреса.
    :return: Ложь для loopback, link-local, неуказанных и некорректных адресов.
    """
    try:
        ip = ipaddress.ip_address(address.split("%", 1)[0])

    except ValueError:
        return False

    # Link-local addresses are not reachable from other devices without a zone id
    return not (ip.is_loopback or ip.is_unspecified or ip.is_link_local)


def probe_outgoing_address(family: socket.AddressFamily, target: str) -> Optional[str]:
    """
    Определяет адрес интерфейса, через который ОС отправила бы пакеты на указанный адрес.

    :param family: Семейство адресов.
    :param target: Внешний адрес для выбора маршрута.
    :return: Адрес интерфейса или None, если маршрута нет.
    """
    try:
        with socket.socket(family, socket.SOCK_DGRAM) as sock:
            # UDP connect only selects a route
            sock.connect((target, 80))
            address: str = sock.getsockname()[0]

    except OSError as err:
        logger.debug("No route for %s: %s", target, err)
        return None

    return address


def resolve_hostname_addresses() -> list[str]:
    """
    Получает адреса, связанные с именем хоста.

    :return: Список адресов хоста без повторов.
    """
    try:
        infos = socket.getaddrinfo(socket.gethostname(), None, proto=socket.IPPROTO_TCP)

    except OSError as err:
        logger.debug("Host name resolution failed: %s", err)
        return []

    addresses: list[str] = []
    for *_, sockaddr in infos:
        if sockaddr[0] not in addresses:
            addresses.append(sockaddr[0])

    return addresses


def get_local_address() -> str:
    """
    Получает основной адрес хоста в локальной сети, отличный от loopback.

    :return: Строковое представление IP-адреса.
    :raise LocalAddressNotFound: Когда ни один сетевой интерфейс не имеет подходящего адреса.
    """
    for family, target in PROBE_TARGETS:
        address: Optional[str] = probe_outgoing_address(family, target)
        if address is not None and is_usable_address(address):
            return address

    for address in resolve_hostname_addresses():
        if is_usable_address(address):
            return address

    raise LocalAddressNotFound("Unable to find a non-loopback local network address")
