import pytest

from anonbox.domain.users.slug import SLUG_MAX_LENGTH, derive_slug


@pytest.mark.parametrize(
    ("username", "expected"),
    [
        ("domm", "domm"),
        ("Domm", "domm"),
        ("John Doe", "johndoe"),
        ("  tabs\tand\nnewlines ", "tabsandnewlines"),
        ("élan_vital!", "lanvital"),
        ("user.name-42", "username42"),
        ("!!!", ""),
    ],
)
def test_derive_slug_examples(username: str, expected: str) -> None:
    assert derive_slug(username) == expected


def test_derive_slug_truncates_to_max_length() -> None:
    slug = derive_slug("a" * 20 + " " + "b" * 20)
    assert slug == "a" * 20 + "b" * 10
    assert len(slug) == SLUG_MAX_LENGTH


@pytest.mark.parametrize(
    "username",
    ["Mixed Case Name", "x" * 80, "ünïcödé 123", "a-b_c.d", "", "ALLCAPS99"],
)
def test_derive_slug_is_idempotent_lowercase_alnum(username: str) -> None:
    slug = derive_slug(username)
    assert derive_slug(slug) == slug
    assert derive_slug(username) == slug
    assert len(slug) <= SLUG_MAX_LENGTH
    assert all(ch in "abcdefghijklmnopqrstuvwxyz0123456789" for ch in slug)
