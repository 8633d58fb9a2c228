import fetchio


def test_create_client_defaults():
    client = fetchio.create_client()
    assert client.base_path == "/"
    assert client.config == {}


def test_path_concatenates_literally():
    client = fetchio.create_client("http://example.org")
    assert client.path("/a").base_path == "http://example.org/a"
    assert client.path("a").base_path == "http://example.orga"
    assert client.path("/a/").path("/b").base_path == "http://example.org/a//b"


def test_path_is_associative():
    client = fetchio.create_client("http://example.org")
    assert client.path("/a").path("/b").base_path == client.path("/a/b").base_path


def test_path_keeps_config():
    client = fetchio.create_client("/api", {"headers": {"G": "0"}, "timeout": 3})
    child = client.path("/v1")
    assert child.config == client.config
    assert child.config is not client.config
    assert child.config["headers"] is not client.config["headers"]


def test_path_child_cannot_change_parent_headers():
    parent = fetchio.create_client("/api", {"headers": {"G": "0"}})
    child = parent.path("/v1")
    child.config["headers"]["X"] = "changed"
    assert parent.config["headers"] == {"G": "0"}


def test_client_copies_given_config():
    config: fetchio.Config = {"headers": {"G": "0"}, "timeout": 1}
    client = fetchio.create_client("/api", config)
    config["timeout"] = 99
    config["headers"]["X"] = "changed"
    assert client.config == {"headers": {"G": "0"}, "timeout": 1}


def test_sub_merges_config():
    client = fetchio.create_client("/api", {"headers": {"G": "0"}})
    child = client.sub("/x", {"headers": {"H": "1"}})

    assert child.base_path == "/api/x"
    assert child.config["headers"] == {"G": "0", "H": "1"}
    assert client.config == {"headers": {"G": "0"}}
    assert client.base_path == "/api"


def test_sub_without_config():
    client = fetchio.create_client("/api", {"timeout": 1})
    child = client.sub("/x")
    assert child.config == {"timeout": 1}


def test_verb_methods_set_method_and_url():
    client = fetchio.create_client("http://example.org/api")
    for name, method in [
        ("get", "GET"),
        ("post", "POST"),
        ("put", "PUT"),
        ("patch", "PATCH"),
        ("delete", "DELETE"),
        ("del_", "DELETE"),
    ]:
        builder = getattr(client, name)("/items")
        assert builder.config["method"] == method
        assert builder.url == "http://example.org/api/items"


def test_verb_default_url_is_base_path():
    client = fetchio.create_client("http://example.org/api")
    assert client.get().url == "http://example.org/api"
    assert client.delete().url == "http://example.org/api"


def test_per_call_options_merge_headers():
    client = fetchio.create_client("/", {"headers": {"A": "1", "B": "1"}, "timeout": 1})
    builder = client.get("x", {"headers": {"B": "2"}, "timeout": 5})
    assert builder.config["headers"] == {"A": "1", "B": "2"}
    assert builder.config["timeout"] == 5
    assert client.config == {"headers": {"A": "1", "B": "1"}, "timeout": 1}


def test_post_payload_encoded():
    client = fetchio.create_client("/")
    builder = client.post("text", "hello")
    assert builder.config["body"] == "hello"
    assert builder.config["headers"] == {"Content-Type": "text/plain"}


def test_explicit_content_type_wins_over_payload_default():
    client = fetchio.create_client("/", {"headers": {"Content-Type": "text/csv"}})
    builder = client.put("data", "a,b\n1,2")
    assert builder.config["headers"] == {"Content-Type": "text/csv"}


def test_builders_are_independent():
    client = fetchio.create_client("/")
    first = client.get("a").param("x", "1").header("H", "1")
    second = client.get("a")
    assert second.query_params == {}
    assert "headers" not in second.config
    assert first.build_url() == "/a?x=1"


def test_repr():
    assert repr(fetchio.create_client("http://x")) == "<Client base_path='http://x'>"
