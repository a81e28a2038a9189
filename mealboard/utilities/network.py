"""Addresses printed when the board server starts."""
import socket
from typing import Dict, Optional

LOOPBACK = ("127.0.0.1", "localhost")


def get_local_ip() -> str:
    """LAN address of this machine, or '127.0.0.1' when there is none.

    Connecting a UDP socket only selects the outgoing interface; nothing is sent.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def server_urls(port: int) -> Dict[str, Optional[str]]:
    '''{"local": ..., "lan": ...}; "lan" is None when only loopback is available.'''
    ip = get_local_ip()
    return {
        "local": f"http://localhost:{port}",
        "lan": None if ip in LOOPBACK else f"http://{ip}:{port}",
    }
