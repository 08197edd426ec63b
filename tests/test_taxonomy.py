from proxifier.services.taxonomy import (
    TypeLineResult,
    card_types,
    extract_types,
    sub_types,
    super_types,
)


class TestExtractTypes:
    def test_legendary_creature(self) -> None:
        result = extract_types("Legendary Creature — Human Wizard")

        assert result == TypeLineResult(
            super_types=["Legendary"],
            card_types=["Creature"],
            sub_types=["Human", "Wizard"],
        )

    def test_no_subtypes(self) -> None:
        result = extract_types("Instant")

        assert result.super_types == []
        assert result.card_types == ["Instant"]
        assert result.sub_types == []

    def test_multiple_super_and_card_types(self) -> None:
        result = extract_types("Legendary Snow Artifact Creature — Golem")

        assert result.super_types == ["Legendary", "Snow"]
        assert result.card_types == ["Artifact", "Creature"]
        assert result.sub_types == ["Golem"]

    def test_basic_land(self) -> None:
        result = extract_types("Basic Land — Island")

        assert result.super_types == ["Basic"]
        assert result.card_types == ["Land"]
        assert result.sub_types == ["Island"]

    def test_unknown_words_are_ignored(self) -> None:
        """Types outside the fixed sets are not reported."""
        result = extract_types("Kindred Sorcery — Elf")

        assert result.card_types == ["Sorcery"]
        assert result.super_types == []

    def test_empty_type_line(self) -> None:
        assert extract_types("") == TypeLineResult()


class TestSubTypes:
    def test_discards_extra_whitespace(self) -> None:
        assert sub_types("Creature —   Elf    Druid ") == ["Elf", "Druid"]

    def test_dash_without_subtypes(self) -> None:
        assert sub_types("Creature — ") == []

    def test_hyphen_is_not_separator(self) -> None:
        assert sub_types("Creature - Elf") == []


class TestHelpers:
    def test_super_types_keep_order(self) -> None:
        assert super_types("World Legendary Enchantment") == ["World", "Legendary"]

    def test_card_types_keep_order(self) -> None:
        assert card_types("Enchantment Artifact") == ["Enchantment", "Artifact"]

    def test_subtype_words_are_not_card_types(self) -> None:
        """Words are matched exactly, so 'Creatures' is not 'Creature'."""
        assert card_types("Tribal Instant — Creatures") == ["Instant"]
