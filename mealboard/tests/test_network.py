from mealboard.utilities import network


def test_lan_url_when_interface_found(monkeypatch):
    monkeypatch.setattr(network, "get_local_ip", lambda: "192.168.1.20")
    assert network.server_urls(8000) == {
        "local": "http://localhost:8000",
        "lan": "http://192.168.1.20:8000",
    }


def test_no_lan_url_on_loopback(monkeypatch):
    monkeypatch.setattr(network, "get_local_ip", lambda: "127.0.0.1")
    assert network.server_urls(9000)["lan"] is None
