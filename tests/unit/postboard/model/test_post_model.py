from postboard.model.post import PostPayload


def test_from_body_keeps_text_and_nulls():
    payload = PostPayload.from_body({"title": "A", "content": None})

    assert payload == PostPayload(title="A", content=None, author=None)


def test_from_body_stringifies_scalars():
    payload = PostPayload.from_body({"title": False, "content": 3.5, "author": 7})

    assert (payload.title, payload.content, payload.author) == ("false", "3.5", "7")


def test_from_body_serializes_objects_and_arrays_as_json():
    payload = PostPayload.from_body({"title": {"nested": True}, "author": [1, "two"]})

    assert payload.title == '{"nested": true}'
    assert payload.author == '[1, "two"]'


def test_from_body_ignores_unknown_keys():
    assert PostPayload.from_body({"title": "A", "likes": 3}) == PostPayload(title="A")


def test_from_body_non_object_is_empty():
    assert PostPayload.from_body("just a string") == PostPayload()
    assert PostPayload.from_body(None) == PostPayload()
