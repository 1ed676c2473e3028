from patternkit.tags import Image, Paragraph, Tag

URL = "http://example.com/pikachu.png"


def test_paragraph_with_image():
    assert str(Paragraph(Image(URL))) == f'<p>\n<img src="{URL}"/>\n</p>\n'


def test_image_is_self_closing():
    img = Image(URL)
    assert str(img) == f'<img src="{URL}"/>\n'
    assert img.attributes == [("src", URL)]


def test_empty_tag_self_closes():
    assert str(Tag("br")) == "<br/>\n"


def test_text_tag():
    assert str(Tag("b", "bold")) == "<b>\nbold\n</b>\n"


def test_paragraph_text_only():
    p = Paragraph(text="hello")
    assert p.name == "p"
    assert p.children == []
    assert str(p) == "<p>\nhello\n</p>\n"


def test_children_order_preserved():
    a, b = Tag("a", "1"), Tag("b", "2")
    out = str(Paragraph(a, b))
    assert out.index("<a>") < out.index("<b>")
    assert out.startswith("<p>\n") and out.endswith("</p>\n")


def test_text_precedes_children():
    t = Tag("div", "head", [Tag("span", "x")])
    assert str(t) == "<div>\nhead\n<span>\nx\n</span>\n</div>\n"


def test_multiple_attributes_rendered_in_order():
    t = Tag("a")
    t.attributes.extend([("href", "x"), ("id", "y")])
    assert str(t) == '<a href="x" id="y"/>\n'