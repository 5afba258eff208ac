from __future__ import annotations

import pytest

from myct.extraction.blocks import PositionedBlock, group_into_sections, scan_fallback_blocks
from myct.extraction.extractor import extract_content
from myct.extraction.links import MAX_LINKS, scan_links
from myct.extraction.media import is_embed_host
from myct.extraction.meta import extract_page_meta
from myct.model.nodes import NodeType, text_node

BASE = "https://a.com/x/y"


def _dicts(page):
    return [node.to_dict() for node in page.content]


def test_headings_wrap_following_blocks_into_sections() -> None:
    html = (
        "<p>Opening paragraph text</p>"
        "<h2>First</h2><p>Paragraph one body</p>"
        "<h2>Second</h2><p>Paragraph two body</p>"
    )

    page = extract_content(html, BASE)

    assert _dicts(page) == [
        {"type": "text", "role": "paragraph", "content": "Opening paragraph text"},
        {
            "type": "section",
            "role": "section",
            "children": [
                {"type": "text", "role": "heading-2", "content": "First"},
                {"type": "text", "role": "paragraph", "content": "Paragraph one body"},
            ],
        },
        {
            "type": "section",
            "role": "section",
            "children": [
                {"type": "text", "role": "heading-2", "content": "Second"},
                {"type": "text", "role": "paragraph", "content": "Paragraph two body"},
            ],
        },
    ]


def test_short_paragraphs_are_dropped() -> None:
    page = extract_content("<p>p1</p><p>exactly 10</p><p>eleven char</p>", BASE)

    contents = [node.content for node in page.content if node.type is NodeType.TEXT]
    assert contents == ["eleven char"]


def test_paragraph_pattern_does_not_match_pre() -> None:
    page = extract_content("<pre>code block content here</pre>", BASE)

    assert all(node.role != "paragraph" for node in page.content)


def test_lists_quotes_and_headings_keep_document_order() -> None:
    html = (
        "<h3>Steps</h3>"
        "<ol><li>Mix</li><li>Bake</li></ol>"
        "<blockquote>Great cake</blockquote>"
        "<ul><li>Flour</li><li></li></ul>"
    )

    page = extract_content(html, BASE)

    section = page.content[0]
    assert section.type is NodeType.SECTION
    assert [child.role for child in section.children] == ["heading-3", "ordered-list", "quote", "list"]
    assert [item.content for item in section.children[1].children] == ["Mix", "Bake"]
    assert [item.content for item in section.children[3].children] == ["Flour"]


def test_heading_without_body_still_forms_section() -> None:
    blocks = [PositionedBlock(0, text_node("Alone", "heading-2"), is_heading=True)]

    sections = group_into_sections(blocks)

    assert len(sections) == 1
    assert sections[0].children == (blocks[0].node,)


def test_plain_text_input_does_not_raise() -> None:
    page = extract_content("just some words, no markup at all", BASE)

    assert page.content == []
    assert page.links == []
    assert page.title is None


def test_non_content_blocks_are_ignored() -> None:
    html = (
        "<header><h1>Site name</h1></header>"
        "<nav><a href='/home'>Home</a></nav>"
        "<script>document.write('<p>Injected paragraph</p>')</script>"
        "<p>Real article paragraph</p>"
        "<footer><p>Copyright footer text</p></footer>"
    )

    page = extract_content(html, BASE)

    assert [node.content for node in page.content] == ["Real article paragraph"]
    assert page.links == []


def test_tables_collect_headers_and_rows() -> None:
    html = (
        "<table><thead><tr><th>Name</th><th>Age</th></tr></thead>"
        "<tbody><tr><td>Ada</td><td>36</td></tr><tr><td>Alan</td><td>41</td></tr></tbody></table>"
        "<table><caption>Empty</caption></table>"
    )

    tables = [node for node in extract_content(html, BASE).content if node.type is NodeType.TABLE]

    assert len(tables) == 1
    assert tables[0].headers == ("Name", "Age")
    assert tables[0].rows == (("Ada", "36"), ("Alan", "41"))
    assert tables[0].role == "table"


def test_images_resolve_sources_and_parse_dimensions() -> None:
    html = '<img src="/i.png" alt="A &amp; B" width="640px" height="x"><img alt="no source"><img src="//cdn.b.com/j.png">'

    images = [node for node in extract_content(html, BASE).content if node.type is NodeType.IMAGE]

    assert [image.to_dict() for image in images] == [
        {"type": "image", "role": "image", "src": "https://a.com/i.png", "alt": "A & B", "width": 640},
        {"type": "image", "role": "image", "src": "https://cdn.b.com/j.png"},
    ]


def test_video_uses_nested_source_and_resolves_poster() -> None:
    html = '<video poster="/p.jpg" controls><source src="movie.mp4" type="video/mp4"></video>'

    videos = [node for node in extract_content(html, BASE).content if node.type is NodeType.VIDEO]

    assert len(videos) == 1
    assert videos[0].src == "https://a.com/x/movie.mp4"
    assert videos[0].poster == "https://a.com/p.jpg"
    assert videos[0].role == "video"


def test_only_allowlisted_iframes_become_embeds() -> None:
    html = (
        '<iframe src="https://www.youtube.com/embed/abc" title="Demo"></iframe>'
        '<iframe src="https://player.vimeo.com/video/1"></iframe>'
        '<iframe src="https://ads.example.com/frame"></iframe>'
        '<iframe src="https://notyoutube.com/embed/x"></iframe>'
    )

    embeds = [node for node in extract_content(html, BASE).content if node.role == "embedded-video"]

    assert [embed.src for embed in embeds] == ["https://www.youtube.com/embed/abc", "https://player.vimeo.com/video/1"]
    assert embeds[0].alt == "Demo"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://youtu.be/x", True),
        ("https://m.youtube.com/watch?v=1", True),
        ("https://vimeo.com.evil.net/", False),
        ("not a url", False),
    ],
)
def test_is_embed_host(url: str, expected: bool) -> None:
    assert is_embed_host(url) is expected


def test_audio_elements_are_extracted() -> None:
    html = '<audio title="Episode 1"><source src="/ep1.mp3"></audio>'

    tracks = [node for node in extract_content(html, BASE).content if node.type is NodeType.AUDIO]

    assert [track.to_dict() for track in tracks] == [
        {"type": "audio", "role": "audio", "src": "https://a.com/ep1.mp3", "alt": "Episode 1"}
    ]


def test_media_follows_sectioned_text() -> None:
    html = '<img src="/first.png"><h2>Title</h2><p>Some body paragraph</p><table><tr><td>1</td></tr></table>'

    types = [node.type for node in extract_content(html, BASE).content]

    assert types == [NodeType.SECTION, NodeType.TABLE, NodeType.IMAGE]


def test_sparse_page_falls_back_to_container_text() -> None:
    long_text = "This container holds a long run of article text that is well over fifty characters."
    html = (
        f"<div>{long_text}</div>"
        "<div>Too short to keep</div>"
        "<div>Share this article with your friends and family on every network you use</div>"
    )

    page = extract_content(html, BASE)

    assert [node.to_dict() for node in page.content] == [{"type": "text", "role": "text", "content": long_text}]


def test_rich_page_skips_fallback() -> None:
    paragraphs = "".join(f"<p>Paragraph number {index} here</p>" for index in range(5))
    html = f"<div>{'x' * 80}</div>{paragraphs}"

    page = extract_content(html, BASE)

    assert all(node.role == "paragraph" for node in page.content)
    assert len(page.content) == 5


def test_fallback_scanner_stoplist_is_case_insensitive() -> None:
    html = "<section>EDIT this page to add more details about the topic being covered here</section>"

    assert scan_fallback_blocks(html) == []


def test_links_are_capped_and_keep_document_order() -> None:
    html = "".join(f'<a href="/p{index}">Link {index}</a>' for index in range(300))

    links = extract_content(html, BASE).links

    assert len(links) == MAX_LINKS == 200
    assert links[0].url == "https://a.com/p0"
    assert links[-1].text == "Link 199"


def test_unfollowable_and_empty_links_are_skipped() -> None:
    html = (
        '<a href="#top">Top</a><a href="javascript:void(0)">JS</a>'
        '<a href="/img"><img src="/i.png"></a><a name="anchor">No href</a>'
        '<a href="https://b.com/page">External</a>'
    )

    links = scan_links(html, BASE)

    assert [link.to_dict() for link in links] == [{"text": "External", "url": "https://b.com/page"}]


def test_meta_reads_attributes_in_any_order() -> None:
    html = (
        "<head><title>  Page &amp; Co </title>"
        '<meta content="A description" name="description">'
        "<meta property='og:description' content='OG description'>"
        '<meta name="author" content="Jane Doe">'
        "</head>"
    )

    meta = extract_page_meta(html)

    assert meta.title == "Page & Co"
    assert meta.description == "A description"
    assert meta.author == "Jane Doe"


def test_meta_falls_back_to_open_graph() -> None:
    html = '<meta property="og:title" content="OG Title"><meta property="og:description" content="OG text">'

    meta = extract_page_meta(html)

    assert meta.title == "OG Title"
    assert meta.description == "OG text"
    assert meta.author is None


def test_extraction_is_idempotent() -> None:
    html = (
        "<title>T</title><h1>Top</h1><p>Body paragraph one</p>"
        '<img src="/a.png"><a href="/n">Next page</a>'
    )

    assert extract_content(html, BASE).to_dict() == extract_content(html, BASE).to_dict()


def test_unresolvable_urls_only_drop_their_own_element() -> None:
    html = (
        '<img src="http://[bad"><img src="/good.png">'
        '<a href="http://[x">bad</a><a href="/ok">Fine link</a>'
    )

    page = extract_content(html, BASE)

    images = [node for node in page.content if node.type is NodeType.IMAGE]
    assert [image.src for image in images] == ["https://a.com/good.png"]
    assert [link.to_dict() for link in page.links] == [{"text": "Fine link", "url": "https://a.com/ok"}]
