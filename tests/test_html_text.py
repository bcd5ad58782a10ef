from web_tournament.html_text import clean_fragment, decode_entities, extract_text, strip_tags


def test_decode_entities_fixed_table():
    assert decode_entities("&amp;") == "&"
    assert decode_entities("&#39;") == "'"
    assert decode_entities("&quot;") == '"'
    assert decode_entities("&lt;b&gt;") == "<b>"
    assert decode_entities("it&rsquo;s &ldquo;ok&rdquo;") == "it's \"ok\""


def test_decode_entities_numeric_references():
    assert decode_entities("&#x27;") == "'"
    assert decode_entities("&#X27;") == "'"
    assert decode_entities("&#8217;") == "’"
    assert decode_entities("&#x41;") == "A"


def test_decode_entities_decodes_once():
    assert decode_entities("&amp;lt;") == "&lt;"


def test_decode_entities_leaves_unknown_and_bare_ampersands():
    assert decode_entities("AT&T &copy; 2024") == "AT&T &copy; 2024"
    assert decode_entities("&#99999999;") == "&#99999999;"


def test_strip_tags():
    assert strip_tags("<b>bold</b> text") == "bold text"


def test_clean_fragment_trims_strips_and_decodes():
    assert clean_fragment("  <b>Fish</b> &amp; Chips ") == "Fish & Chips"


def test_extract_text_removes_script_content():
    text = extract_text("<script>evil()</script><p>Hello</p>")
    assert "Hello" in text
    assert "evil" not in text
    assert text == "Hello"


def test_extract_text_removes_multiline_script_and_style():
    html = (
        "<STYLE type='text/css'>\nbody { color: red; }\n</STYLE>"
        "<script type=\"module\">\nvar a = 1;\nfetch('/x');\n</script>"
        "<div>Hi</div>"
    )
    assert extract_text(html) == "Hi"


def test_extract_text_collapses_whitespace_and_decodes():
    assert extract_text("<p>a</p>\n\n<p>b&nbsp;c</p>") == "a b c"


def test_extract_text_tolerates_unclosed_markup():
    text = extract_text("<p>Intro<script>never closed")
    assert text.startswith("Intro")
