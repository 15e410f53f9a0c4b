import pytest

from memorycards.card import BACK_IMAGE, Card, CardType


@pytest.fixture
def card():
    return Card(index=3, card_type=CardType.ANDORIS, x=15, y=10, width=150, height=150)


def test_new_card_shows_back(card):
    assert card.front is False
    assert card.image_name() == "404back.png"


def test_front_image_names_follow_type():
    for kind, name in [
        (CardType.ANDORIS, "404Andoris.png"),
        (CardType.BELKA, "404Belka.png"),
        (CardType.KLUKAI, "404Klukai.png"),
        (CardType.MECHTY, "404Mechty.png"),
    ]:
        c = Card(0, kind, 0, 0, front=True)
        assert c.image_name() == name


@pytest.mark.parametrize(
    "point, inside",
    [
        ((15, 10), True),
        ((15 + 149, 10 + 149), True),
        ((15 + 150, 10), False),
        ((15, 10 + 150), False),
        ((14, 10), False),
        ((15, 9), False),
    ],
)
def test_contains_edges(card, point, inside):
    assert card.contains(*point) is inside


def test_is_clicked_toggles_face(card):
    assert card.is_clicked(20, 20) is True
    assert card.front is True
    assert card.image_name() == CardType.ANDORIS.filename
    assert card.is_clicked(20, 20) is True
    assert card.front is False
    assert card.image_name() == BACK_IMAGE


def test_missed_click_leaves_card(card):
    assert card.is_clicked(500, 500) is False
    assert card.front is False


def test_flip_sets_state(card):
    card.flip(True)
    assert card.front is True
    card.flip(True)
    assert card.front is True
    card.flip(False)
    assert card.front is False


def test_cards_compare_by_identity():
    a = Card(1, CardType.BELKA, 0, 0)
    b = Card(1, CardType.BELKA, 0, 0)
    assert a != b
    assert a == a