from codesync.highlighting.escaper import escape_html
from codesync.highlighting.regions import HtmlText, ScriptRegion, StyleRegion, split_regions


def split(source):
    return split_regions(escape_html(source))


def test_plain_html_is_one_segment():
    assert split('<h1>Hello</h1>') == [HtmlText('&lt;h1&gt;Hello&lt;/h1&gt;')]


def test_empty_document():
    assert split('') == []


def test_script_and_style_regions_in_order():
    segments = split('<script>a</script><style>b{}</style><script>c</script>')
    assert segments == [
        HtmlText('&lt;script&gt;'),
        ScriptRegion(0, 'a'),
        HtmlText('&lt;/script&gt;&lt;style&gt;'),
        StyleRegion(1, 'b{}'),
        HtmlText('&lt;/style&gt;&lt;script&gt;'),
        ScriptRegion(2, 'c'),
        HtmlText('&lt;/script&gt;'),
    ]


def test_region_body_is_raw_text():
    segments = split('<script>if (a < b && c) s = "x";</script>')
    assert segments[1] == ScriptRegion(0, 'if (a < b && c) s = "x";')


def test_script_tag_with_attributes_and_case():
    segments = split('<SCRIPT type="module">go()</Script >')
    assert segments[0] == HtmlText('&lt;SCRIPT type=&quot;module&quot;&gt;')
    assert segments[1] == ScriptRegion(0, 'go()')
    assert segments[2] == HtmlText('&lt;/Script &gt;')


def test_empty_script_body():
    assert split('<script></script>')[1] == ScriptRegion(0, '')


def test_unterminated_script_stays_html():
    source = '<p>x</p><script>var a = 1;'
    assert split(source) == [HtmlText(escape_html(source))]


def test_script_inside_attribute_is_not_a_region():
    source = '<div title="<script>x</script>">y</div>'
    assert split(source) == [HtmlText(escape_html(source))]


def test_script_inside_comment_is_not_a_region():
    source = '<!-- <script>x</script> --><p>y</p>'
    assert split(source) == [HtmlText(escape_html(source))]


def test_placeholder_lookalike_text_is_untouched():
    source = '<p>__SCRIPT_0__ __STYLE_0__</p><script>a</script>'
    segments = split(source)
    assert segments[0] == HtmlText('&lt;p&gt;__SCRIPT_0__ __STYLE_0__&lt;/p&gt;&lt;script&gt;')
    assert segments[1] == ScriptRegion(0, 'a')


def test_regions_concatenate_back_to_document():
    source = '<style>p{color:red}</style>\n<p class="a">&amp;</p>\n<script>\n  let x = "<b>";\n</script>'
    escaped = escape_html(source)
    rebuilt = ''.join(s.text if isinstance(s, HtmlText) else escape_html(s.raw_body)
                      for s in split_regions(escaped))
    assert rebuilt == escaped


def test_indices_restart_per_call():
    assert split('<script>a</script>')[1].index == 0
    assert split('<script>b</script>')[1].index == 0
