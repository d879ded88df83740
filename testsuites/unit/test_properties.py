import pytest

from theia_tools.locator_loader import (
    By,
    LocatorSet,
    attribute_equals,
    element_from_path,
    get_attribute,
    get_integer_attribute,
    has,
    has_class,
    has_not,
    text_of,
)
from testsuites.fake_playwright import FakeElement, FakeLocator


LOCATORS = LocatorSet({"menu": {"label": {"locator": By.class_name("label")}}})


def _element():
    label = FakeElement(text="  File \n", attributes={"class": "label p-mod-active"})
    node = FakeElement(attributes={"class": "item focused", "aria-posinset": "3", "data-type": "submenu"})
    node.add(".label", label)
    return FakeLocator([node], "node")


@pytest.mark.asyncio
async def test_has_and_has_not():
    element = _element()
    assert await has("class", "focused")(element, LOCATORS) is True
    assert await has("class", "selected")(element, LOCATORS) is False
    assert await has_not("class", "busy")(element, LOCATORS) is True
    assert await has_not("aria-busy", "true")(element, LOCATORS) is True


@pytest.mark.asyncio
async def test_attribute_getters():
    element = _element()
    assert await get_attribute("data-type")(element, LOCATORS) == "submenu"
    assert await get_attribute("title")(element, LOCATORS) == ""
    assert await get_integer_attribute("aria-posinset")(element, LOCATORS) == 3


@pytest.mark.asyncio
async def test_attribute_equals_value_and_predicates():
    element = _element()

    async def is_submenu(value):
        return value == "submenu"

    assert await attribute_equals("data-type", "submenu")(element, LOCATORS) is True
    assert await attribute_equals("data-type", "command")(element, LOCATORS) is False
    assert await attribute_equals("aria-posinset", lambda v: int(v) > 2)(element, LOCATORS) is True
    assert await attribute_equals("data-type", is_submenu)(element, LOCATORS) is True


@pytest.mark.asyncio
async def test_element_path_items():
    element = _element()

    assert await text_of(By.class_name("label"))(element, LOCATORS) == "File"
    assert await text_of(LOCATORS.menu.label)(element, LOCATORS) == "File"
    assert await text_of(lambda locators: locators.menu.label)(element, LOCATORS) == "File"
    assert await has("class", "p-mod-active", By.class_name("label"))(element, LOCATORS) is True


@pytest.mark.asyncio
async def test_invalid_path_item_raises():
    with pytest.raises(TypeError):
        await element_from_path(_element(), LOCATORS, ("not a selector",))


def test_has_class_predicate():
    assert has_class("p-Menu") == "contains(concat(' ', normalize-space(@class), ' '), ' p-Menu ')"
    assert By.xpath(f".//*[{has_class('clear')}]").to_playwright().startswith("xpath=.//*[contains(")


def test_extraction_functions_compare_by_name_and_getter():
    getter = has("class", "x")
    assert getter.name == "has(class, x)"
    assert getter != has("class", "x")
