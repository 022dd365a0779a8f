from mailoutline.rendering import ContentRenderer, render_content, segment_subheadings, segment_text


def test_bullet_lines_become_one_unordered_list():
    text = "- Discuss budget\n* Review timeline\n-   Plan launch"

    assert segment_text(text) == "<ul><li>Discuss budget</li><li>Review timeline</li><li>Plan launch</li></ul>"


def test_numbered_lines_become_one_ordered_list():
    text = "1. Arrive\n2. Present\n10. Wrap up"

    assert segment_text(text) == "<ol><li>Arrive</li><li>Present</li><li>Wrap up</li></ol>"


def test_plain_lines_become_paragraphs():
    text = "  First line  \n\n\nSecond line\n"

    assert segment_text(text) == "<p>First line</p><p>Second line</p>"


def test_meeting_scenario():
    assert segment_text("- Discuss budget\n- Review timeline") == \
        "<ul><li>Discuss budget</li><li>Review timeline</li></ul>"


def test_paragraph_closes_list_and_order_is_preserved():
    text = "Intro\n- a\n- b\nMiddle\n1. one\n2. two\nOutro\n- c"

    assert segment_text(text) == (
        "<p>Intro</p><ul><li>a</li><li>b</li></ul><p>Middle</p>"
        "<ol><li>one</li><li>two</li></ol><p>Outro</p><ul><li>c</li></ul>"
    )


def test_list_type_switch_reopens_list():
    assert segment_text("1. one\n- bullet\n2. two") == \
        "<ol><li>one</li></ol><ul><li>bullet</li></ul><ol><li>two</li></ol>"


def test_markers_need_whitespace():
    assert segment_text("-5 degrees\n**bold**\n3.5 stars") == \
        "<p>-5 degrees</p><p>**bold**</p><p>3.5 stars</p>"


def test_blank_text_renders_empty():
    assert segment_text("") == ""
    assert segment_text("\n  \n") == ""


def test_text_is_escaped():
    assert segment_text("<script>alert(1)</script>\n- a & b") == \
        "<p>&lt;script&gt;alert(1)&lt;/script&gt;</p><ul><li>a &amp; b</li></ul>"


def test_list_content():
    assert render_content(["one", "two"]) == "<ul><li><p>one</p></li><li><p>two</p></li></ul>"


def test_mapping_content_keeps_insertion_order():
    content = {"Time": "3pm", "Place": "Room <4>"}

    assert render_content(content) == (
        "<ul><li><strong>Time:</strong> <p>3pm</p></li>"
        "<li><strong>Place:</strong> <p>Room &lt;4&gt;</p></li></ul>"
    )


def test_mapping_inside_list_renders_nested_lists():
    content = [{"Owner": "Ana"}, "plain"]

    assert render_content(content) == (
        "<ul><li><ul><li><strong>Owner:</strong> <p>Ana</p></li></ul></li>"
        "<li><p>plain</p></li></ul>"
    )


def test_unsupported_values_render_empty():
    assert render_content(None) == ""
    assert render_content(42) == ""
    assert render_content(True) == ""
    assert render_content([None]) == "<ul><li></li></ul>"


def test_subheadings_disabled_by_default():
    assert render_content("**Agenda**") == "<p>**Agenda**</p>"


def test_subheadings_split_text():
    text = "Intro line\n**Agenda**\n- a\n- b\n**Notes** Bring laptops"

    assert segment_subheadings(text) == (
        "<p>Intro line</p><h4>Agenda</h4><ul><li>a</li><li>b</li></ul>"
        "<h4>Notes</h4><p>Bring laptops</p>"
    )


def test_subheadings_renderer_without_markers_segments_text():
    renderer = ContentRenderer(subheadings=True)

    assert renderer.render("- a\n- b") == "<ul><li>a</li><li>b</li></ul>"


def test_subheadings_keep_bold_lead_in_bullets_as_list_items():
    renderer = ContentRenderer(subheadings=True)

    assert renderer.render("- **Budget**: 5k\n- **Timeline**: Q3") == \
        "<ul><li>**Budget**: 5k</li><li>**Timeline**: Q3</li></ul>"


def test_subheadings_only_start_at_line_start():
    text = "Costs are **fixed** this year\n**Risks**\n1. **Late** delivery"

    assert segment_subheadings(text) == (
        "<p>Costs are **fixed** this year</p><h4>Risks</h4>"
        "<ol><li>**Late** delivery</li></ol>"
    )
