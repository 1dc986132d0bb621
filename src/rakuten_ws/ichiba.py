"""Resources of the Rakuten Ichiba marketplace API

Example
-------

>>> from rakuten_ws import ichiba
>>> ichiba.registry.configure(application_id="...")
>>> for item in ichiba.Item.search(keyword="green tea").fetch():
...     print(item.name, item.price)
"""
from .resource import Registry, Resource

__all__ = ["registry", "Item", "Genre", "Ranking"]

API_URL = "https://app.rakuten.co.jp/services/api/"

registry = Registry()


class Item(
    Resource,
    registry=registry,
    endpoint=API_URL + "IchibaItem/Search/20170706",
):
    """an item for sale"""

    fields = (
        "itemName",
        "catchcopy",
        "itemCode",
        "itemPrice",
        "itemCaption",
        "itemUrl",
        "affiliateUrl",
        "imageFlag",
        "smallImageUrls",
        "mediumImageUrls",
        "availability",
        "taxFlag",
        "postageFlag",
        "creditCardFlag",
        "shopOfTheYearFlag",
        "shipOverseasFlag",
        "shipOverseasArea",
        "asurakuFlag",
        "asurakuClosingTime",
        "asurakuArea",
        "affiliateRate",
        "startTime",
        "endTime",
        "reviewCount",
        "reviewAverage",
        "pointRate",
        "pointRateStartTime",
        "pointRateEndTime",
        "giftFlag",
        "shopName",
        "shopCode",
        "shopUrl",
        "shopAffiliateUrl",
        "genreId",
        "tagIds",
    )

    @staticmethod
    def parse_response(body):
        # format version 1 wraps each item in {"Item": ...}
        return [entry.get("Item", entry) for entry in body["Items"]]


class Genre(
    Resource,
    registry=registry,
    endpoint=API_URL + "IchibaGenre/Search/20140222",
):
    """a product category"""

    fields = ("genreId", "genreName", "genreLevel", "itemCount")

    @staticmethod
    def parse_response(body):
        return [entry.get("child", entry) for entry in body["children"]]


class Ranking(
    Item,
    endpoint=API_URL + "IchibaItem/Ranking/20170628",
    resource_name="item",
):
    """an item in the sales ranking"""

    fields = ("rank",)
