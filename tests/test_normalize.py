from tweet_metadata.twitter.normalize import (
    orig_image_url,
    parse_source_url,
    parse_status_url,
)


def test_parse_status_url():
    """Username and status id from the supported hosts"""
    assert parse_status_url("https://x.com/user/status/1234567890") == ("user", "1234567890")
    assert parse_status_url("https://twitter.com/user/status/9876543210") == ("user", "9876543210")
    assert parse_status_url("https://mobile.twitter.com/user/statuses/42") == ("user", "42")
    assert parse_status_url("https://fxtwitter.com/user/status/1111111111") == ("user", "1111111111")
    assert parse_status_url("https://twitter.com/i/web/status/555") == (None, "555")
    assert parse_status_url("https://example.com/user/status/1") == (None, None)
    assert parse_status_url("invalid url") == (None, None)


def test_orig_image_url():
    assert orig_image_url("https://pbs.twimg.com/media/EBGbJe_U8AA4Ekb.jpg") == \
        "https://pbs.twimg.com/media/EBGbJe_U8AA4Ekb.jpg:orig"
    assert orig_image_url("https://pbs.twimg.com/media/EBGbJe_U8AA4Ekb.jpg:small") == \
        "https://pbs.twimg.com/media/EBGbJe_U8AA4Ekb.jpg:orig"
    assert orig_image_url("https://pbs.twimg.com/media/EBGbJe_U8AA4Ekb?format=png&name=900x900") == \
        "https://pbs.twimg.com/media/EBGbJe_U8AA4Ekb.png:orig"
    assert orig_image_url("https://pbs.twimg.com/media/EBGbJe_U8AA4Ekb") is None
    assert orig_image_url("https://x.com/user/status/1") is None


def test_parse_source_url_status():
    hint = parse_source_url("https://twitter.com/nounproject/status/1092436932044509185")
    assert hint.username == "nounproject"
    assert hint.status_id == "1092436932044509185"
    assert hint.is_direct_image_url is False
    assert hint.orig_image_url is None


def test_parse_source_url_image_with_referer():
    """An image URL takes the username and status id from its referer"""
    hint = parse_source_url(
        "https://pbs.twimg.com/media/EBGbJe_U8AA4Ekb.jpg:small",
        "https://twitter.com/hitoribocchi/status/1162246335063691264",
    )
    assert hint.url == "https://pbs.twimg.com/media/EBGbJe_U8AA4Ekb.jpg:small"
    assert hint.is_direct_image_url is True
    assert hint.orig_image_url == "https://pbs.twimg.com/media/EBGbJe_U8AA4Ekb.jpg:orig"
    assert hint.username == "hitoribocchi"
    assert hint.status_id == "1162246335063691264"


def test_parse_source_url_web_status_keeps_referer_username():
    hint = parse_source_url("https://twitter.com/i/web/status/10", "https://twitter.com/someone/status/20")
    assert hint.status_id == "10"
    assert hint.username == "someone"


def test_parse_source_url_unknown():
    hint = parse_source_url("https://example.com/picture.png")
    assert hint.username is None
    assert hint.status_id is None
    assert hint.is_direct_image_url is False
