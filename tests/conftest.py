import pytest

import rakuten_ws


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="run against the live API (needs RWS_APPLICATION_ID)",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "live: test against the live API")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--live"):
        # --live given in cli: do not skip live tests
        return
    skip_live = pytest.mark.skip(reason="need --live option to run")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
def registry():
    return rakuten_ws.Registry(rakuten_ws.Configuration("my-app-id"))


@pytest.fixture
def Item(registry):
    class Item(
        rakuten_ws.Resource,
        registry=registry,
        endpoint="https://api.test.com/Item/Search",
    ):
        fields = (
            "itemName",
            "itemCode",
            "itemPrice",
            "itemAvailableFlag",
            "shopName",
            "postageFlag",
        )

        @staticmethod
        def parse_response(body):
            return [entry["Item"] for entry in body["Items"]]

    return Item
