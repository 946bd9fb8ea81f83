import pytest
import html5lib
from bs4 import BeautifulSoup
from lxml import etree as ET

from html_cleanser.html_tree import parse_html, serialize
from html_cleanser.tag_stripper import clean_html, strip_tags

ENGINES = ["lxml", "bs4"]


@pytest.mark.parametrize("engine", ENGINES)
def test_unwrap_link_keeps_text(engine):
    out = clean_html('<div>Hello <a href="x">Click</a> world</div>', ["a"], True, engine=engine)
    assert "<div>Hello Click world</div>" in out
    assert "<a" not in out


@pytest.mark.parametrize("engine", ENGINES)
def test_remove_script_with_content(engine):
    out = clean_html("<div><script>alert(1)</script><p>Safe</p></div>", ["script"], False, engine=engine, fragment=True)
    assert out == "<div><p>Safe</p></div>"


@pytest.mark.parametrize("engine", ENGINES)
def test_nested_matches_are_all_unwrapped(engine):
    out = clean_html("<span><span>nested</span></span>", ["span"], True, engine=engine, fragment=True)
    assert out == "nested"


@pytest.mark.parametrize("engine", ENGINES)
@pytest.mark.parametrize("tags", [["a", "div"], ["div", "a"]])
def test_result_does_not_depend_on_tag_order(engine, tags):
    out = clean_html('<div>Go <a href="#">here</a> now</div>', tags, True, engine=engine, fragment=True)
    assert out == "Go here now"


@pytest.mark.parametrize("engine", ENGINES)
def test_empty_tag_set_changes_nothing(engine):
    html = '<p class="x">Hi <b>there</b></p>'
    expected = serialize(parse_html(html, engine=engine))
    assert clean_html(html, [], True, engine=engine) == expected
    assert clean_html(html, "", False, engine=engine) == expected
    assert "<b>there</b>" in expected


@pytest.mark.parametrize("engine", ENGINES)
@pytest.mark.parametrize("keep", [True, False])
def test_stripping_twice_is_the_same_as_once(engine, keep):
    html = "<div>a<span>b<span>c</span></span><p>d<span>e</span></p></div>"
    tree = parse_html(html, engine=engine)
    strip_tags(tree, ["span", "p"], keep)
    once = serialize(tree)
    strip_tags(tree, ["span", "p"], keep)
    assert serialize(tree) == once


@pytest.mark.parametrize("engine", ENGINES)
@pytest.mark.parametrize("keep", [True, False])
def test_no_stripped_tag_survives(engine, keep):
    html = "<div><b>1</b><i><b>2</b></i><table><tr><td><b>3</b></td></tr></table></div>"
    tree = parse_html(html, engine=engine)
    strip_tags(tree, ["b", "i"], keep)
    assert tree.find_all("b") == []
    assert tree.find_all("i") == []
    assert "<b>" not in serialize(tree)


@pytest.mark.parametrize("engine", ENGINES)
def test_inner_content_stays_in_place(engine):
    out = clean_html("<p>a<em>b<i>c</i>d</em>e</p>", ["em"], True, engine=engine, fragment=True)
    assert out == "<p>ab<i>c</i>de</p>"


@pytest.mark.parametrize("engine", ENGINES)
def test_removed_subtree_text_is_gone(engine):
    out = clean_html("<div>keep<span>gone <b>deep</b></span> after</div>", ["span"], False, engine=engine, fragment=True)
    assert out == "<div>keep after</div>"
    assert "gone" not in out
    assert "deep" not in out


@pytest.mark.parametrize("engine", ENGINES)
def test_nested_removal_keeps_following_text(engine):
    out = clean_html("<div>a<div>b</div>c</div>tail", ["div"], False, engine=engine, fragment=True)
    assert out == "tail"


@pytest.mark.parametrize("engine", ENGINES)
def test_sibling_order_is_preserved(engine):
    html = "<section><h1>T</h1><div><p>x</p><p>y</p></div><footer>f</footer></section>"
    out = clean_html(html, ["div"], True, engine=engine, fragment=True)
    assert out == "<section><h1>T</h1><p>x</p><p>y</p><footer>f</footer></section>"


@pytest.mark.parametrize("engine", ENGINES)
def test_attributes_comments_and_entities_survive(engine):
    html = '<div id="main" class="c"><!-- note --><span>Tom &amp; Jerry</span><img src="x.png"></div>'
    out = clean_html(html, ["span"], True, engine=engine, fragment=True)
    assert out == '<div id="main" class="c"><!-- note -->Tom &amp; Jerry<img src="x.png"></div>'


@pytest.mark.parametrize("engine", ENGINES)
def test_fragment_text_is_escaped(engine):
    out = clean_html("Tom &amp; Jerry <b>x</b>", ["b"], True, engine=engine, fragment=True)
    assert out == "Tom &amp; Jerry x"


@pytest.mark.parametrize("engine", ENGINES)
def test_tag_names_are_normalized(engine):
    out = clean_html("<div><a>x</a><em>y</em></div>", [" A ", "EM, ", ""], True, engine=engine, fragment=True)
    assert out == "<div>xy</div>"
    out = clean_html("<div><a>x</a><em>y</em></div>", "a, em", True, engine=engine, fragment=True)
    assert out == "<div>xy</div>"


@pytest.mark.parametrize("engine", ENGINES)
@pytest.mark.parametrize("keep", [True, False])
def test_root_is_never_removed(engine, keep):
    html = "<p>x</p>"
    assert clean_html(html, ["html"], keep, engine=engine) == serialize(parse_html(html, engine=engine))
    assert clean_html(html, ["body"], keep, engine=engine, fragment=True) == "<p>x</p>"


@pytest.mark.parametrize("engine", ENGINES)
def test_body_is_unwrapped_into_html(engine):
    assert clean_html("<p>x</p>", ["body"], True, engine=engine) == "<html><head></head><p>x</p></html>"


@pytest.mark.parametrize("engine", ENGINES)
def test_unknown_tag_is_a_no_op(engine):
    html = "<p>x</p>"
    assert clean_html(html, ["blink"], True, engine=engine) == serialize(parse_html(html, engine=engine))


def test_returns_the_same_tree():
    tree = parse_html("<p>x</p>")
    assert strip_tags(tree, ["p"], True) is tree


def test_raw_lxml_element():
    root = html5lib.parse("<p>Hi <a>x</a></p>", treebuilder="lxml", namespaceHTMLElements=False).getroot()
    assert strip_tags(root, ["a"], True) is root
    assert "<p>Hi x</p>" in ET.tostring(root, encoding="unicode", method="html")


def test_raw_soup():
    soup = BeautifulSoup("<p>Hi <a>x</a></p>", "html5lib")
    assert strip_tags(soup, "a", True) is soup
    assert soup.find("a") is None
    assert soup.p.get_text() == "Hi x"


def test_missing_tree_fails_fast():
    with pytest.raises(TypeError):
        strip_tags(None, ["a"], True)


def test_mode_must_be_bool():
    tree = parse_html("<p>x</p>")
    with pytest.raises(TypeError):
        strip_tags(tree, ["p"], "yes")
    with pytest.raises(TypeError):
        strip_tags(tree, ["p"], 1)


def test_unsupported_tree_object():
    with pytest.raises(TypeError):
        strip_tags(object(), ["p"], True)


@pytest.mark.parametrize("engine", ENGINES)
def test_attribute_order_is_kept(engine):
    html = '<a title="t" href="h" data-z="1" class="c">x</a><b>y</b>'
    out = clean_html(html, ["b"], True, engine=engine, fragment=True)
    assert out == '<a title="t" href="h" data-z="1" class="c">x</a>y'


@pytest.mark.parametrize("engine", ENGINES)
def test_fragment_keeps_head_level_elements(engine):
    html = '<meta name="robots" content="noindex"><title>T</title><p>x <a>y</a></p>'
    out = clean_html(html, ["a"], True, engine=engine, fragment=True)
    assert out == '<meta name="robots" content="noindex"><title>T</title><p>x y</p>'


def test_control_characters_do_not_break_default_engine():
    out = clean_html("<p>a\x01b <a>x</a></p>", ["a"], True, fragment=True)
    assert "<a" not in out
    assert "x</p>" in out


def test_names_lxml_can_not_hold_are_kept_as_written():
    out = clean_html('<p><x:y>t</x:y><!-- a -- b --><b>z</b></p>', ["b"], True, fragment=True)
    assert out == "<p><x:y>t</x:y><!-- a -- b -->z</p>"
