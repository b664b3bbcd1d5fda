import logging
import re
from unittest import mock

from codesync.highlighting import highlight_document
from codesync.highlighting.config import HighlightConfig
from codesync.highlighting.escaper import unescape_html
from codesync.highlighting.theme import Theme

SPAN_RE = re.compile(r'<span class="[\w\-]+">|</span>')

SAMPLES = [
    '',
    'plain text & more',
    '<h1>Hello World</h1>',
    '<!DOCTYPE html>\n<html lang="en">\n<head><title>T</title></head>\n<body></body>\n</html>',
    '<style>\nbody { margin: 0; color: #fff; }\n/* note */\n.a > b:hover { x: y }\n</style>',
    '<script>\nconst f = async () => { return await fetch("/a?b=1&c=2"); };\n// done\n</script>',
    '<div style="color: red; background: url(\'x.png\')" data-x=1>a &lt; b</div>',
    '<script>var s = "</div><p class=\'x\'>";</script><style>p{}</style>',
    '<script>unterminated <b>bold</b>',
    '<!-- <script>alert(1)</script> -->',
    '<img src=x onerror="alert(1)"><svg/onload=alert(2)>',
    '__SCRIPT_0__ __STYLE_0__ <script>a</script>',
    '<p>"quotes" \'single\' & ampersands &amp; entities</p>',
    '<< >> <1> </> <a <b>',
]


def strip_spans(markup):
    return SPAN_RE.sub('', markup)


def test_hello_world():
    assert highlight_document('<h1>Hello World</h1>') == (
        '<span class="hl-html-tag">&lt;h1</span><span class="hl-html-tag">&gt;</span>'
        'Hello World'
        '<span class="hl-html-tag">&lt;/h1</span><span class="hl-html-tag">&gt;</span>'
    )


def test_empty_document():
    assert highlight_document('') == ''


def test_markup_text_is_the_source():
    for source in SAMPLES:
        assert unescape_html(strip_spans(highlight_document(source))) == source


def test_no_markup_other_than_spans():
    for source in SAMPLES:
        text = strip_spans(highlight_document(source))
        assert '<' not in text and '>' not in text and '"' not in text


def test_spans_are_balanced():
    for source in SAMPLES:
        depth = 0
        for match in SPAN_RE.finditer(highlight_document(source)):
            depth += -1 if match.group() == '</span>' else 1
            assert depth >= 0
        assert depth == 0


def test_never_double_escaped():
    result = highlight_document('<script>if (a && b < c) {}</script><style>a::after{content:"&"}</style>')
    assert '&amp;amp;' not in result
    assert '&amp;&amp;' in result
    assert '&amp;lt;' not in result


def test_existing_entities_stay_visible():
    assert highlight_document('&lt;') == '&amp;lt;'


def test_script_region_is_isolated_from_html_rules():
    result = highlight_document('<script>var s = "<div class=\'x\'>";</script>')
    assert '<span class="hl-string">&quot;&lt;div class=&#x27;x&#x27;&gt;&quot;</span>' in result
    assert 'hl-html-attr-name' not in result
    assert result.count('hl-html-tag-embed') == 4


def test_style_and_script_highlighted_by_language():
    result = highlight_document('<style>h1 { color: red; }</style><script>const x = foo(1);</script>')
    assert ('<span class="hl-html-tag-embed">&lt;style</span><span class="hl-html-tag-embed">&gt;</span>'
            '<span class="hl-css-selector">h1</span> {') in result
    assert ('<span class="hl-keyword">const</span> x = <span class="hl-func-name">foo</span>('
            '<span class="hl-number">1</span>);'
            '<span class="hl-html-tag-embed">&lt;/script</span>') in result


def test_code_in_html_text_is_not_highlighted():
    result = highlight_document('<p>const x = foo(1);</p>')
    assert 'hl-keyword' not in result
    assert 'hl-func-name' not in result


def test_injection_is_inert():
    result = highlight_document('<img src=x onerror=alert(1)><script>alert("x")</script>')
    assert '<img' not in result
    assert '<script' not in result


def test_deterministic():
    for source in SAMPLES:
        assert highlight_document(source) == highlight_document(source)


def test_custom_theme_prefix():
    config = HighlightConfig(theme=Theme(class_prefix='code-'))
    assert highlight_document('<b>', config) == (
        '<span class="code-html-tag">&lt;b</span><span class="code-html-tag">&gt;</span>'
    )


def test_inline_styles_follow_custom_prefix():
    config = HighlightConfig(theme=Theme(class_prefix='code-'))
    result = highlight_document('<p style="color: red">', config)
    assert '<span class="code-css-inline-value">red</span>' in result


def test_failing_region_falls_back_to_plain_text(caplog):
    with mock.patch('codesync.highlighting.composer.highlight_css', side_effect=RuntimeError('boom')):
        with caplog.at_level(logging.ERROR):
            result = highlight_document('<style>a<b{}</style><p>x</p>')
    assert 'a&lt;b{}' in result
    assert '<span class="hl-html-tag">&lt;p</span>' in result
    assert 'StyleRegion #0' in caplog.text


def test_style_and_script_do_not_share_rules():
    result = highlight_document('<style>.a{color:red}</style><script>let a=1</script>')
    assert '<span class="hl-css-property">color</span>' in result
    assert '<span class="hl-keyword">color</span>' not in result
    assert '<span class="hl-keyword">let</span>' in result
    assert 'hl-css-property">let' not in result
    assert 'hl-css-selector">let' not in result
