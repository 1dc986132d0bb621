import pytest

from rakuten_ws import accessor_name, predicate_name, to_camel, to_snake


@pytest.mark.parametrize(
    "token, expect",
    [
        ("itemName", "item_name"),
        ("ItemCode", "item_code"),
        ("shopOfTheYearFlag", "shop_of_the_year_flag"),
        ("shopURL", "shop_url"),
        ("rank", "rank"),
        ("item_name", "item_name"),
        ("", ""),
    ],
)
def test_to_snake(token, expect):
    assert to_snake(token) == expect


@pytest.mark.parametrize(
    "token, expect",
    [
        ("item_code", "itemCode"),
        ("small_image_urls", "smallImageUrls"),
        ("itemCode", "itemCode"),
        ("rank", "rank"),
        ("item__code", "item__code"),
        ("item_1", "item_1"),
        ("_private", "_private"),
    ],
)
def test_to_camel(token, expect):
    assert to_camel(token) == expect


@pytest.mark.parametrize(
    "token",
    [
        "itemName",
        "ItemCode",
        "shopURL",
        "a_b_c",
        "aBcDe",
        "item__code",
        "pointRateStartTime",
        "x",
        "",
    ],
)
def test_snake_camel_snake_is_stable(token):
    snake = to_snake(token)
    assert to_snake(to_camel(snake)) == snake


class TestAccessorName:
    def test_prefix_stripped(self):
        assert accessor_name("item", "itemName") == "name"

    def test_no_prefix(self):
        assert accessor_name("item", "shopName") == "shop_name"

    def test_prefix_only_as_whole_word(self):
        assert accessor_name("item", "itemsCount") == "items_count"

    def test_nothing_after_prefix(self):
        assert accessor_name("item", "Item") == "item"

    def test_other_resource(self):
        assert accessor_name("genre", "genreId") == "id"


class TestPredicateName:
    def test_prefixed(self):
        assert predicate_name("item", "itemAvailableFlag") == "is_available"

    def test_not_prefixed(self):
        assert predicate_name("item", "postageFlag") == "is_postage"

    def test_bare_flag(self):
        assert predicate_name("item", "Flag") == "is_flag"
