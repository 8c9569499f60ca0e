from level2.headerfields import HeaderFieldOwner


def test_added_field_can_be_read_back():
    owner = HeaderFieldOwner()
    owner.add_header_field("Host", "example.com")
    assert owner.get_header_field("Host") == "example.com"


def test_missing_field_is_none():
    owner = HeaderFieldOwner()
    assert owner.get_header_field("Host") is None


def test_adding_again_replaces_value():
    owner = HeaderFieldOwner()
    owner.add_header_field("Accept", "a")
    owner.add_header_field("Accept", "b")
    assert owner.get_header_field("Accept") == "b"
    assert owner.all_header_fields() == {"Accept": "b"}


def test_all_fields_are_ordered_by_name():
    owner = HeaderFieldOwner()
    owner.add_header_field("b-field", "2")
    owner.add_header_field("a-field", "1")
    assert list(owner.all_header_fields()) == ["a-field", "b-field"]


def test_names_are_case_sensitive():
    owner = HeaderFieldOwner()
    owner.add_header_field("Host", "example.com")
    assert owner.get_header_field("host") is None