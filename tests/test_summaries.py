"""Tests for summary projections and text rendering."""

import json

from apollo_core.summaries import (
    format_location,
    render_report,
    summarize_email_accounts,
    summarize_message_activities,
    summarize_organization,
    summarize_organizations,
    summarize_people,
    summarize_person,
    summarize_sequences,
    total_entries,
)

MOCK_PERSON = {
    "name": "John Doe",
    "title": "CTO",
    "organization": {"name": "Test Corp"},
    "city": "San Francisco",
    "state": "California",
    "email": "john@test.com",
    "linkedin_url": "https://linkedin.com/in/johndoe",
}


class TestLocation:
    """City/state/country collapsing."""

    def test_city_and_state(self):
        """Both present gives 'City, State'."""
        assert format_location(MOCK_PERSON) == "San Francisco, California"

    def test_falls_back_to_country(self):
        """Missing state falls back to country."""
        assert format_location({"city": "Paris", "country": "France"}) == "France"

    def test_nothing_known(self):
        """No location fields gives None."""
        assert format_location({}) is None


class TestPeople:
    """People search and person enrichment summaries."""

    def test_person_row(self):
        """A search hit is reduced to six fields."""
        (row,) = summarize_people({"people": [MOCK_PERSON]})

        assert row.name == "John Doe"
        assert row.title == "CTO"
        assert row.company == "Test Corp"
        assert row.location == "San Francisco, California"
        assert row.email == "john@test.com"
        assert row.linkedin == "https://linkedin.com/in/johndoe"

    def test_top_five_only(self):
        """Only the first five hits are summarized."""
        people = [{"name": f"P{i}"} for i in range(8)]

        rows = summarize_people({"people": people})

        assert [row.name for row in rows] == ["P0", "P1", "P2", "P3", "P4"]

    def test_missing_people_list(self):
        """No people key yields an empty summary."""
        assert summarize_people({}) == []

    def test_enriched_person_phone(self):
        """Phone is the first sanitized number."""
        person = dict(MOCK_PERSON, phone_numbers=[
            {"sanitized_number": "+14155550100"},
            {"sanitized_number": "+14155550199"},
        ])

        profile = summarize_person(person)

        assert profile.phone == "+14155550100"
        assert profile.location == "San Francisco, California"

    def test_enriched_person_without_phone(self):
        """No phone numbers gives None."""
        assert summarize_person(MOCK_PERSON).phone is None


class TestOrganizations:
    """Organization search and enrichment summaries."""

    def test_technologies_capped_at_ten(self):
        """Only the first 10 technologies are kept, in order."""
        technologies = [{"name": f"Tech{i}"} for i in range(12)]

        profile = summarize_organization({"name": "Acme", "current_technologies": technologies})

        assert profile.technologies == technologies[:10]

    def test_enrichment_fields(self):
        """Apollo field names map onto the summary."""
        profile = summarize_organization({
            "name": "Apollo",
            "primary_domain": "apollo.io",
            "industry": "software",
            "estimated_num_employees": 900,
            "country": "United States",
            "short_description": "Sales intelligence",
            "founded_year": 2015,
            "linkedin_url": "https://linkedin.com/company/apollo",
        })

        assert profile.domain == "apollo.io"
        assert profile.employees == 900
        assert profile.location == "United States"
        assert profile.description == "Sales intelligence"
        assert profile.founded == 2015
        assert profile.technologies is None

    def test_search_rows(self):
        """Search hits keep name/domain/industry/employees/location."""
        (row,) = summarize_organizations({"organizations": [{
            "name": "Acme",
            "primary_domain": "acme.com",
            "industry": "manufacturing",
            "estimated_num_employees": 40,
            "city": "Austin",
            "state": "Texas",
        }]})

        assert row.domain == "acme.com"
        assert row.location == "Austin, Texas"

    def test_total_entries(self):
        """Count comes from pagination, 0 when missing."""
        assert total_entries({"pagination": {"total_entries": 42}}) == 42
        assert total_entries({}) == 0


class TestSequencesAndAccounts:
    """Sequence and mailbox summaries."""

    def test_sequence_stats(self):
        """Stats are renamed from Apollo's num_* fields."""
        (summary,) = summarize_sequences({"emailer_campaigns": [{
            "id": "seq_1",
            "name": "Outbound",
            "active": True,
            "num_steps": 4,
            "num_contacted_people": 100,
            "num_bounced_people": 3,
            "num_replied_people": 12,
            "num_interested_people": 5,
            "num_opt_out_people": 1,
        }]})

        assert summary.id == "seq_1"
        assert summary.stats.sent == 100
        assert summary.stats.bounced == 3
        assert summary.stats.replied == 12
        assert summary.stats.interested == 5
        assert summary.stats.opt_out == 1

    def test_sequences_uncapped(self):
        """Every sequence is summarized."""
        campaigns = [{"id": str(i)} for i in range(30)]

        assert len(summarize_sequences({"emailer_campaigns": campaigns})) == 30

    def test_email_accounts(self):
        """Accounts keep id/email/active/type."""
        (account,) = summarize_email_accounts({"email_accounts": [{
            "id": "ea_1", "email": "me@acme.com", "active": True, "type": "gmail", "extra": 1,
        }]})

        assert (account.id, account.email, account.active, account.type) == (
            "ea_1", "me@acme.com", True, "gmail",
        )


class TestMessageActivities:
    """Touch aggregation for a single message."""

    def test_counts_by_touch_type(self):
        """Opens, clicks and replies are counted separately."""
        payload = {"emailer_touches": [
            {"touch_type": "opened", "created_at": "t1", "user_agent": "ua"},
            {"touch_type": "opened", "created_at": "t2"},
            {"touch_type": "clicked", "created_at": "t3"},
            {"touch_type": "replied", "created_at": "t4"},
            {"touch_type": "bounced", "created_at": "t5"},
        ]}

        report = summarize_message_activities("msg_1", payload)

        assert report.message_id == "msg_1"
        assert report.total_activities == 5
        assert (report.opens, report.clicks, report.replies) == (2, 1, 1)
        assert report.activities[0].type == "opened"
        assert report.activities[0].user_agent == "ua"
        assert report.activities[1].user_agent is None

    def test_no_touches(self):
        """Missing touches give zero counts."""
        report = summarize_message_activities("msg_2", {})

        assert report.total_activities == 0
        assert report.activities == []


class TestRenderReport:
    """Three-part text layout."""

    def test_layout_with_label(self):
        """Status, labelled summary, then full data."""
        payload = {"people": [MOCK_PERSON]}
        summary = summarize_people(payload)

        text = render_report("Found 1 people", summary, payload, label="Top Results")

        status, summary_part, full_part = text.split("\n\n")
        assert status == "Found 1 people"
        assert summary_part.startswith("Top Results:\n")
        assert json.loads(summary_part[len("Top Results:\n"):])[0]["location"] == (
            "San Francisco, California"
        )
        assert full_part.startswith("Full data:\n")
        assert json.loads(full_part[len("Full data:\n"):]) == payload

    def test_layout_without_label(self):
        """Enrichment layout puts summary JSON right after the status line."""
        text = render_report("Person Enrichment:", {"name": "x"}, {"person": {"name": "x"}})

        assert text == (
            'Person Enrichment:\n\n{\n  "name": "x"\n}\n\n'
            'Full data:\n{\n  "person": {\n    "name": "x"\n  }\n}'
        )

    def test_empty_sections_still_rendered(self):
        """Empty summary and payload still produce both sections."""
        text = render_report("Found 0 sequences", [], {}, label="Summary")

        assert text == "Found 0 sequences\n\nSummary:\n[]\n\nFull data:\n{}"
