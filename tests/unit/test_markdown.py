from dn_mail import markdown


def test_apply_once_per_buffer():
    toggle = markdown.MarkdownToggle()
    ran: list[str] = []
    notices: list[str] = []

    assert toggle.apply(1, ran.append, notices.append)
    assert ran == list(markdown.MARKDOWN_SYNTAX_COMMANDS)
    assert toggle.applied(1)

    assert not toggle.apply(1, ran.append, notices.append)
    assert ran == list(markdown.MARKDOWN_SYNTAX_COMMANDS)
    assert notices == [markdown.APPLIED_NOTICE, markdown.ALREADY_APPLIED_NOTICE]


def test_buffers_are_independent():
    toggle = markdown.MarkdownToggle()
    ran: list[str] = []

    toggle.apply(1, ran.append, lambda msg: None)
    assert not toggle.applied(2)
    assert toggle.apply(2, ran.append, lambda msg: None)
    assert len(ran) == 2 * len(markdown.MARKDOWN_SYNTAX_COMMANDS)



def test_no_way_back_once_applied():
    toggle = markdown.MarkdownToggle()
    toggle.apply(3, lambda cmd: None, lambda msg: None)
    assert not hasattr(toggle, "forget")
    assert not toggle.apply(3, lambda cmd: None, lambda msg: None)
    assert toggle.applied(3)
