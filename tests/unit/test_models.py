"""Pydantic model validation tests."""

import pytest
from pydantic import ValidationError

from proposal_studio.models import (
    IntakeData,
    GuestCountBand,
    BudgetBand,
    VIBE_TAGS,
    StyleProfile,
    ProposalMode,
    ProposalSection,
    ProposalPackage,
    SectionType,
    GenerationOptions,
    Project,
    ProjectStatus,
)


def _intake_payload(**overrides) -> dict:
    payload = {
        "coupleName": "Alex & Jordan",
        "email": "alex@example.com",
        "eventDate": "June 2026",
        "guestCount": "50-100",
        "budgetBand": "$40k - $70k",
        "location": "Napa, CA",
        "vibeTags": ["Romantic", "Garden"],
        "notes": "Lots of candles",
    }
    payload.update(overrides)
    return payload


class TestIntakeData:
    def test_accepts_camel_case_payload(self):
        intake = IntakeData.model_validate(_intake_payload())

        assert intake.couple_name == "Alex & Jordan"
        assert intake.guest_count == GuestCountBand.INTIMATE
        assert intake.budget_band == BudgetBand.MODERATE
        assert intake.vibe_tags == ("Romantic", "Garden")

    def test_to_api_uses_camel_case(self):
        data = IntakeData.model_validate(_intake_payload()).to_api()

        assert data["coupleName"] == "Alex & Jordan"
        assert data["guestCount"] == "50-100"
        assert data["budgetBand"] == "$40k - $70k"
        assert data["vibeTags"] == ["Romantic", "Garden"]

    def test_optional_fields_default_to_empty(self):
        intake = IntakeData(
            couple_name="A & B",
            email="a@b.com",
            guest_count="300+",
            budget_band="$150k+",
            vibe_tags=["Moody"],
        )
        assert intake.event_date == ""
        assert intake.location == ""
        assert intake.notes == ""

    def test_strips_whitespace(self):
        intake = IntakeData.model_validate(_intake_payload(coupleName="  Sam & Lee  ", email=" sam@lee.io "))
        assert intake.couple_name == "Sam & Lee"
        assert intake.email == "sam@lee.io"

    def test_duplicate_tags_are_removed_in_order(self):
        intake = IntakeData.model_validate(_intake_payload(vibeTags=["Modern", "Coastal", "Modern"]))
        assert intake.vibe_tags == ("Modern", "Coastal")

    def test_requires_at_least_one_tag(self):
        with pytest.raises(ValidationError):
            IntakeData.model_validate(_intake_payload(vibeTags=[]))

    def test_rejects_unknown_tag(self):
        with pytest.raises(ValidationError):
            IntakeData.model_validate(_intake_payload(vibeTags=["Cyberpunk"]))

    def test_rejects_non_list_tags(self):
        with pytest.raises(ValidationError):
            IntakeData.model_validate(_intake_payload(vibeTags=42))

    def test_rejects_blank_couple_name(self):
        with pytest.raises(ValidationError):
            IntakeData.model_validate(_intake_payload(coupleName="   "))

    def test_rejects_invalid_email(self):
        with pytest.raises(ValidationError):
            IntakeData.model_validate(_intake_payload(email="not-an-email"))

    def test_rejects_unknown_guest_band(self):
        with pytest.raises(ValidationError):
            IntakeData.model_validate(_intake_payload(guestCount="1000"))

    def test_rejects_unknown_budget_band(self):
        with pytest.raises(ValidationError):
            IntakeData.model_validate(_intake_payload(budgetBand="$5k"))

    def test_is_frozen(self):
        intake = IntakeData.model_validate(_intake_payload())
        with pytest.raises(ValidationError):
            intake.couple_name = "Someone Else"

    def test_band_vocabularies(self):
        assert [b.value for b in GuestCountBand] == ["Less than 50", "50-100", "100-200", "200-300", "300+"]
        assert [b.value for b in BudgetBand] == [
            "$20k - $40k", "$40k - $70k", "$70k - $100k", "$100k - $150k", "$150k+",
        ]
        assert len(VIBE_TAGS) == 14


class TestStyleProfile:
    def _payload(self, **overrides) -> dict:
        payload = {
            "palette": ["#aabbcc", "#112233", "#445566", "#778899", "#ABCDEF"],
            "adjectives": ["Airy", "Soft", "Luminous"],
            "motifs": ["Linen", "Olive Branches", "Candlelight"],
            "venueTypes": ["Vineyard", "Courtyard", "Barn"],
            "summary": "Soft and luminous. Grounded in Tuscan warmth.",
        }
        payload.update(overrides)
        return payload

    def test_valid_profile_normalizes_hex(self):
        profile = StyleProfile.model_validate(self._payload())
        assert profile.palette[0] == "#AABBCC"
        assert profile.venue_types == ("Vineyard", "Courtyard", "Barn")

    def test_palette_must_have_five_colors(self):
        with pytest.raises(ValidationError):
            StyleProfile.model_validate(self._payload(palette=["#FFFFFF"] * 4))

    def test_palette_rejects_non_hex(self):
        with pytest.raises(ValidationError):
            StyleProfile.model_validate(self._payload(palette=["blush", "#112233", "#445566", "#778899", "#ABCDEF"]))

    def test_adjectives_allow_three_to_five(self):
        StyleProfile.model_validate(self._payload(adjectives=["A", "B", "C", "D", "E"]))
        with pytest.raises(ValidationError):
            StyleProfile.model_validate(self._payload(adjectives=["A", "B"]))
        with pytest.raises(ValidationError):
            StyleProfile.model_validate(self._payload(adjectives=["A", "B", "C", "D", "E", "F"]))

    def test_motifs_must_be_exactly_three(self):
        with pytest.raises(ValidationError):
            StyleProfile.model_validate(self._payload(motifs=["Linen", "Olive"]))

    def test_rejects_blank_items(self):
        with pytest.raises(ValidationError):
            StyleProfile.model_validate(self._payload(venueTypes=["Vineyard", " ", "Barn"]))

    def test_rejects_empty_summary(self):
        with pytest.raises(ValidationError):
            StyleProfile.model_validate(self._payload(summary=""))

    def test_rejects_string_instead_of_list(self):
        with pytest.raises(ValidationError):
            StyleProfile.model_validate(self._payload(motifs="Linen"))


class TestGenerationOptions:
    def test_defaults(self):
        options = GenerationOptions()
        assert options.teaser_included is False
        assert options.planner_notes == ""

    def test_accepts_camel_case(self):
        options = GenerationOptions.model_validate({"teaserIncluded": True, "plannerNotes": "Keep it airy"})
        assert options.teaser_included is True
        assert options.planner_notes == "Keep it airy"

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValidationError):
            GenerationOptions.model_validate({"temperature": 0.9})


class TestProposalPackage:
    def test_get_section(self, sample_profile):
        package = ProposalPackage(
            id="PROP-20250101-abcd",
            mode=ProposalMode.TEASER,
            title="A & B - Vision Proposal",
            sections=(
                ProposalSection(id="cover", title="Cover", type=SectionType.TEXT, content="Prepared for A & B"),
            ),
            style_profile=sample_profile,
        )
        assert package.is_teaser is True
        assert package.get_section("cover").content == "Prepared for A & B"
        assert package.get_section("budget") is None

    def test_section_type_values(self):
        assert {t.value for t in SectionType} == {"text", "gallery", "stats", "budget_chart"}


class TestProject:
    def test_defaults(self):
        project = Project(id="PRJ-1", client_name="Walk-in")
        assert project.status == ProjectStatus.LEAD
        assert project.proposals == ()
        assert project.is_complete is False

    def test_status_values(self):
        assert [s.value for s in ProjectStatus] == ["Lead", "Contract Signed", "Planning"]
