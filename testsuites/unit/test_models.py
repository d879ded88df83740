import copy
import pickle

import pytest

from theia_tools.locator_loader import By, Constructor, LocatorSet, SelectorQuery, is_descriptor, merge


@pytest.mark.parametrize(
    "selector, expected",
    [
        (By.css(".a > b"), ".a > b"),
        (By.xpath("//li"), "xpath=//li"),
        (By.id("theia:menubar"), '[id="theia:menubar"]'),
        (By.class_name("p-Menu"), ".p-Menu"),
        (By.name("q"), '[name="q"]'),
        (By.tag_name("body"), "body"),
        (By.link_text("Open"), 'a:text-is("Open")'),
        (By.partial_link_text("Op"), 'a:has-text("Op")'),
    ],
)
def test_selector_to_playwright(selector, expected):
    assert selector.to_playwright() == expected


def test_from_spec_validates_strategy():
    assert By.from_spec("css", ".x") == By.css(".x")
    with pytest.raises(ValueError):
        By.from_spec("shadow", ".x")


def test_selector_query_and_constructor():
    query = SelectorQuery(lambda title: By.xpath(f".//li[@title='{title}']"), "item by title")
    assert query.query(title="Clear") == By.xpath(".//li[@title='Clear']")

    constructor = Constructor(dict)
    assert constructor.create(a=1) == {"a": 1}
    assert all(is_descriptor(d) for d in (query, constructor, By.css("x")))
    assert not is_descriptor({"locator": By.css("x")})


def test_locator_set_access():
    locators = LocatorSet({"editor": {"tab": {"locator": By.css(".tab")}}, "entries": [{"a": 1}]})

    assert locators.editor.tab.locator == By.css(".tab")
    assert locators["editor"]["tab"]["locator"] == By.css(".tab")
    assert locators.get_path("editor.tab.locator") == By.css(".tab")
    assert locators.get_path("editor.missing.locator", "default") == "default"
    assert isinstance(locators.entries[0], LocatorSet)
    with pytest.raises(AttributeError):
        locators.missing


def test_locator_set_is_read_only():
    locators = LocatorSet({"editor": {"tab": {}}})
    with pytest.raises(TypeError):
        locators["editor"] = {}
    with pytest.raises(TypeError):
        del locators["editor"]
    with pytest.raises(TypeError):
        locators.editor = {}
    with pytest.raises(TypeError):
        del locators.editor


def test_locator_set_copies():
    locators = LocatorSet({"editor": {"tab": {"locator": By.css(".tab")}}})

    assert copy.copy(locators) is locators
    assert copy.deepcopy(locators) is locators
    assert pickle.loads(pickle.dumps(locators)) == locators
    assert locators.to_dict() == {"editor": {"tab": {"locator": By.css(".tab")}}}


def test_constructor_leaf_in_embedded_catalog():
    class Tab:
        def __init__(self, element):
            self.element = element

    base = {"tab": {"locator": By.css(".tab"), "wrapper": Constructor(dict)}}
    locators = LocatorSet(merge(base, {"tab": {"wrapper": Constructor(Tab)}}))

    assert locators.tab.locator == By.css(".tab")
    assert isinstance(locators.tab.wrapper.create("element"), Tab)
    assert base["tab"]["wrapper"] == Constructor(dict)
