from yt_transcript.entities import decode_html


def test_named_entities():
    assert decode_html("&amp; &lt; &gt; &quot; &apos;") == "& < > \" '"


def test_numeric_entities_then_trim():
    assert decode_html("&#39; &#32;") == "'"


def test_nbsp_becomes_plain_space():
    assert decode_html("a&nbsp;b") == "a b"


def test_plain_text_only_trimmed():
    assert decode_html("  hello world  ") == "hello world"
    assert decode_html("hello world") == "hello world"


def test_empty_and_none():
    assert decode_html(None) == ""
    assert decode_html("") == ""


def test_single_pass_does_not_double_decode():
    assert decode_html("&amp;#39;") == "&#39;"
    assert decode_html("&amp;lt;") == "&lt;"


def test_out_of_range_code_point_left_alone():
    assert decode_html("x&#99999999999;") == "x&#99999999999;"
