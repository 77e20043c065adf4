from qr_file_server.main import run_server

run_server()
