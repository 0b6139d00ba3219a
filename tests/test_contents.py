from collections import deque
from dataclasses import dataclass

from markupsafe import Markup

from htmlgen.builder import DONT_ESCAPE, build_contents_string
from htmlgen.dom_model import HtmlElement


class Label:
    def __init__(self, text: str) -> None:
        self.text = text

    def __str__(self) -> str:
        return self.text


class Badge:
    def __html__(self) -> str:
        return '<span class="badge">new</span>'


@dataclass
class Opaque:
    value: int


def test_truthy_string_keys_render_the_key():
    assert build_contents_string({"Click me": True, "Ignored": False}) == "Click me"


def test_string_key_with_stringable_value():
    assert build_contents_string({"Shown": Label("yes"), "Hidden": Label("")}) == "Shown"


def test_blank_keys_are_not_used_as_content():
    assert build_contents_string({"  ": True}) == ""


def test_fragments_are_trimmed_filtered_and_joined():
    assert build_contents_string(["a", "  b\t", "", None, True, False]) == "a\nb"


def test_numbers_are_rendered_as_text():
    assert build_contents_string([1, 2.5, 0]) == "1\n2.5\n0"


def test_strings_are_escaped_by_default():
    assert build_contents_string(["<b>Tom & Jerry</b>"]) == "&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;"


def test_escaping_can_be_disabled():
    assert build_contents_string(["<b>trusted</b>"], DONT_ESCAPE) == "<b>trusted</b>"


def test_markup_is_never_escaped():
    assert build_contents_string([Markup("<i>x</i>"), Badge()]) == '<i>x</i>\n<span class="badge">new</span>'


def test_nested_elements_are_rendered():
    contents = [HtmlElement("span", {}, "x"), "tail"]

    assert build_contents_string(contents) == "<span>x</span>\ntail"


def test_stringable_objects_are_converted_and_escaped():
    assert build_contents_string([Label(" <ok> ")]) == "&lt;ok&gt;"


def test_objects_without_text_form_are_dropped():
    assert build_contents_string(["before", Opaque(1), "after"]) == "before\nafter"


def test_deferred_and_nested_contents():
    contents = [lambda: "a", lambda: ["b", lambda: "c"], {"d": lambda: True}]

    assert build_contents_string(contents) == "a\nb\nc\nd"


def test_scalar_contents():
    assert build_contents_string("  hello  ") == "hello"
    assert build_contents_string(None) == ""


def test_result_is_markup():
    assert isinstance(build_contents_string("x"), Markup)


def needs_argument(value):
    return value


def test_callables_needing_arguments_are_dropped():
    assert build_contents_string(["a", needs_argument, "b"]) == "a\nb"


def test_sequences_and_sets_are_flattened():
    assert build_contents_string(range(3)) == "0\n1\n2"
    assert build_contents_string(deque(["x", "y"])) == "x\ny"
    assert build_contents_string({"b", "a"}) == "a\nb"


def test_bytes_are_decoded_as_utf8():
    assert build_contents_string([b"caf\xc3\xa9 <b>"]) == "café &lt;b&gt;"
