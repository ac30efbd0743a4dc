from __future__ import annotations

import pytest

from sample_enums import ALL_ENUMS, Car, RGBColor, Scale, Suit, Suit2, Tarot
from typesafe_enum.core.errors import ImmutableMemberError


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def test_compare_to_should_order_by_ordinal() -> None:
    for s1 in Suit:
        for s2 in Suit:
            assert s1.compare_to(s2) == _sign(s1.ordinal - s2.ordinal)


def test_compare_to_should_be_undefined_across_types() -> None:
    assert Suit.CLUBS.compare_to(Suit2.CLUBS) is None
    assert Suit.CLUBS.compare_to(None) is None
    assert Suit.CLUBS.compare_to(0) is None


def test_rich_comparisons_should_follow_ordinal() -> None:
    assert Suit.CLUBS < Suit.DIAMONDS < Suit.HEARTS < Suit.SPADES
    assert Suit.SPADES >= Suit.SPADES
    assert Suit.CLUBS <= Suit.CLUBS
    assert not Suit.HEARTS > Suit.SPADES
    assert sorted([Suit.SPADES, Suit.CLUBS, Suit.HEARTS]) == [Suit.CLUBS, Suit.HEARTS, Suit.SPADES]
    assert max(Suit) is Suit.SPADES


def test_rich_comparisons_should_reject_other_types() -> None:
    with pytest.raises(TypeError):
        Suit.CLUBS < Tarot.CUPS  # noqa: B015
    with pytest.raises(TypeError):
        Suit.CLUBS >= 0  # noqa: B015


def test_equality_should_be_identity() -> None:
    for s1 in Suit:
        for s2 in Suit:
            assert (s1 == s2) is (s1 is s2)
            assert (s1 != s2) is (s1 is not s2)


def test_members_should_be_unequal_to_none_and_other_enums() -> None:
    for s in Suit:
        assert s is not None
        assert (s == None) is False  # noqa: E711
        assert (s != None) is True  # noqa: E711
        assert s != s.key
        assert s != s.ordinal
        for t in Tarot:
            assert s != t
            assert t != s
    assert Suit.CLUBS != Suit2.CLUBS


def test_hash_should_be_consistent_with_equality() -> None:
    for s1 in Suit:
        for s2 in Suit:
            assert (hash(s1) == hash(s2)) is (s1 == s2)
    assert hash(Suit.HEARTS) == hash(Suit.HEARTS)
    assert isinstance(hash(Suit.HEARTS), int)


def test_hash_should_differ_across_types() -> None:
    for s1 in Suit:
        s2 = Suit2.find_by_key(s1.key)
        assert s2 is not None
        assert s1.ordinal == s2.ordinal
        assert hash(s1) != hash(s2)


def test_members_should_work_as_dict_keys() -> None:
    pips = {Suit.CLUBS: "♣", Suit.DIAMONDS: "♦", Suit.HEARTS: "♥", Suit.SPADES: "♠"}
    assert Suit.map(lambda suit: pips[suit]) == ["♣", "♦", "♥", "♠"]
    assert len({Suit.CLUBS, Suit2.CLUBS, Suit.CLUBS}) == 2


def test_members_should_support_branching() -> None:
    def pip(suit: Suit) -> str:
        if suit == Suit.CLUBS:
            return "♣"
        if suit == Suit.DIAMONDS:
            return "♦"
        if suit == Suit.HEARTS:
            return "♥"
        if suit == Suit.SPADES:
            return "♠"
        raise ValueError(f"unknown suit: {suit}")

    assert Suit.map(pip) == ["♣", "♦", "♥", "♠"]


def test_str_should_mention_type_key_and_ordinal() -> None:
    for enum_cls in (Suit, Tarot, RGBColor, Scale):
        for member in enum_cls:
            text = str(member)
            for info in (enum_cls.__name__, member.key, str(member.ordinal)):
                assert info in text
    assert str(Suit.HEARTS) == "Suit.HEARTS [2]"


def test_repr_should_include_value_for_value_enums() -> None:
    assert repr(Suit.CLUBS) == "<Suit.CLUBS: 0>"
    assert repr(Scale.KILO) == "<Scale.KILO: 2 value=1000>"


def test_members_should_be_immutable() -> None:
    with pytest.raises(ImmutableMemberError):
        Suit.CLUBS.color = "black"
    with pytest.raises(AttributeError):
        Suit.CLUBS.key = "SPADES"
    with pytest.raises(ImmutableMemberError):
        Car.Audi.price = 1
    with pytest.raises(ImmutableMemberError):
        del Car.Audi.price
    assert Car.Audi.price == 25_000


@pytest.mark.parametrize("enum_cls", ALL_ENUMS)
def test_registry_invariants_should_hold_for_every_enum(enum_cls: type) -> None:
    members = enum_cls.to_list()
    assert len(members) == enum_cls.size()
    for index, member in enumerate(members):
        assert member.ordinal == index
        assert enum_cls.find_by_ordinal(index) is member
        assert enum_cls.find_by_key(member.key) is member
        assert getattr(enum_cls, member.key) is member
