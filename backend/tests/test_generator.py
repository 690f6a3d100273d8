"""Template engine tests - registry, rendering, numbering, clauses, ids, metadata."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import re
from datetime import datetime
from types import MappingProxyType

import pytest

from legal_ally.template_engine import (
    TEMPLATES,
    FieldValues,
    TemplateDefinition,
    TemplateNotFoundError,
    generate_document,
    get_document_metadata,
    get_template,
    list_templates,
    new_document_id,
    render_document,
)
from legal_ally.template_engine.generator import format_date, to_base36
from legal_ally.template_engine.registry import Section

# ---------------------------------------------------------------------------
# Fixed collaborators
# ---------------------------------------------------------------------------
FIXED_NOW = datetime(2026, 3, 7, 9, 30, 0)
FIXED_ID = "LA-TEST-ABC123"


def fixed_clock():
    return FIXED_NOW


def fixed_id(now):
    return FIXED_ID


def render(document_type, form_data=None, customizations=None):
    return generate_document(
        document_type,
        form_data,
        customizations,
        clock=fixed_clock,
        id_factory=fixed_id,
    )


ALL_TYPES = [
    "business-contract",
    "rental-agreement",
    "nda",
    "will-trust",
    "llc-formation",
    "employment-contract",
]

EXPECTED_PLACEHOLDERS = {
    "business-contract": [
        "[Client Name]", "[Service Provider]", "[Service Description]",
        "[Contract Type]", "[Amount]", "[Start Date]", "[Duration]",
        "[Company Representative]",
    ],
    "rental-agreement": [
        "[Property Address]", "[Landlord Name]", "[Tenant Name]", "[Email Address]",
        "[Phone Number]", "[Start Date]", "[Term]", "[Rent Amount]", "[Security Deposit]",
    ],
    "nda": [
        "[Disclosing Party]", "[Receiving Party]", "[Contact Name]", "[Email]", "[Duration]",
    ],
    "will-trust": [
        "[Full Name]", "[Address]", "[Executor Name]", "[Alternate Executor]",
        "[Guardian Name]", "[Other Party]",
    ],
    "llc-formation": [
        "[LLC Name]", "[State]", "[Member Name]", "[Address]", "[Email]", "[Amount]",
        "[Other Party]",
    ],
    "employment-contract": [
        "[Company Name]", "[Employee Name]", "[Job Title]", "[Supervisor Name]",
        "[Salary Amount]", "[Start Date]",
    ],
}

NDA_DATA = {
    "fullName": "Jane Doe",
    "email": "jane@example.com",
    "disclosingParty": "Acme Corp",
    "receivingParty": "Beta LLC",
    "duration": "2 years",
}


# ===================================================================== #
#  Registry                                                               #
# ===================================================================== #

class TestRegistry:
    def test_six_builtin_templates(self):
        assert list_templates() == [
            "business-contract",
            "rental-agreement",
            "will-trust",
            "llc-formation",
            "nda",
            "employment-contract",
        ]
        assert set(TEMPLATES) == set(ALL_TYPES)

    def test_unknown_template_is_none(self):
        assert get_template("lease-to-own") is None

    def test_every_template_has_sections(self):
        for template in TEMPLATES.values():
            assert len(template.sections) >= 1

    def test_clause_counts(self):
        assert len(get_template("business-contract").custom_clauses) == 3
        assert len(get_template("rental-agreement").custom_clauses) == 3
        assert len(get_template("nda").custom_clauses) == 2
        for doc_type in ("will-trust", "llc-formation", "employment-contract"):
            assert len(get_template(doc_type).custom_clauses) == 0

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            TEMPLATES["new-type"] = get_template("nda")
        with pytest.raises(TypeError):
            get_template("nda").custom_clauses["extra"] = "<p>x</p>"

    def test_template_requires_sections(self):
        with pytest.raises(ValueError):
            TemplateDefinition(id="empty", title="Empty", sections=(), custom_clauses=MappingProxyType({}))

    def test_section_is_frozen(self):
        section = get_template("nda").sections[0]
        assert isinstance(section, Section)
        with pytest.raises(Exception):
            section.title = "Changed"


# ===================================================================== #
#  Rendering                                                              #
# ===================================================================== #

class TestRenderEmptyData:
    @pytest.mark.parametrize("document_type", ALL_TYPES)
    def test_contains_titles_and_placeholders(self, document_type):
        html = render(document_type, {}, {})
        template = get_template(document_type)
        assert template.title in html
        for section in template.sections:
            assert section.title in html
        for placeholder in EXPECTED_PLACEHOLDERS[document_type]:
            assert placeholder in html, placeholder
        assert "[Your Name]" in html

    @pytest.mark.parametrize("document_type", ALL_TYPES)
    def test_none_inputs_do_not_raise(self, document_type):
        html = render(document_type, None, None)
        assert "Signatures" in html

    def test_whitespace_counts_as_missing(self):
        html = render("nda", {"disclosingParty": "   "})
        assert "Disclosing Party: [Disclosing Party]" in html

    def test_fallback_wording(self):
        html = render("business-contract", {})
        assert "Payment terms: Net 30 days." in html
        llc = render("llc-formation", {})
        assert "managed by its members" in llc
        assert "require majority approval" in llc


class TestRenderWithData:
    def test_values_are_interpolated(self):
        html = render("nda", NDA_DATA)
        assert "Disclosing Party: Acme Corp" in html
        assert "Receiving Party: Beta LLC" in html
        assert "Contact: Jane Doe (jane@example.com)" in html
        assert "remain in effect for 2 years" in html
        assert "[Disclosing Party]" not in html

    def test_values_are_html_escaped(self):
        html = render("business-contract", {"companyName": "Smith & Sons <LLC>"})
        assert "Smith &amp; Sons &lt;LLC&gt;" in html
        assert "<LLC>" not in html

    def test_header_uses_injected_clock_and_id(self):
        html = render("nda", NDA_DATA)
        assert "<strong>Generated:</strong> 3/7/2026" in html
        assert f"<strong>Document ID:</strong> {FIXED_ID}" in html

    def test_contract_parties_uses_generation_date(self):
        html = render("business-contract", {"fullName": "Jane Doe"})
        assert "entered into on 3/7/2026 between Jane Doe" in html

    def test_footer_is_identical_for_every_type(self):
        footers = {
            render(doc_type).split('<footer class="document-footer">')[1]
            for doc_type in ALL_TYPES
        }
        assert len(footers) == 1
        footer = footers.pop()
        assert "Legal Disclaimer" in footer
        assert "Generated by Legal Ally" in footer

    def test_order_of_blocks(self):
        html = render("nda", NDA_DATA, {"return-clause": True})
        positions = [
            html.index('class="document-header"'),
            html.index("1. Parties"),
            html.index("4. Term"),
            html.index("5. Additional Provisions"),
            html.index("6. Signatures"),
            html.index('class="document-footer"'),
        ]
        assert positions == sorted(positions)


class TestNumbering:
    @pytest.mark.parametrize("document_type", ALL_TYPES)
    def test_signatures_follow_sections_without_clauses(self, document_type):
        n = len(get_template(document_type).sections)
        html = render(document_type, {}, {})
        assert f"<h2>{n + 1}. Signatures</h2>" in html
        assert "Additional Provisions" not in html

    def test_numbering_with_included_clause(self):
        n = len(get_template("business-contract").sections)
        html = render("business-contract", {}, {"termination": True})
        for index, section in enumerate(get_template("business-contract").sections, start=1):
            assert f"<h2>{index}. {section.title}</h2>" in html
        assert f"<h2>{n + 1}. Additional Provisions</h2>" in html
        assert f"<h2>{n + 2}. Signatures</h2>" in html

    def test_false_flags_do_not_add_provisions(self):
        html = render("nda", NDA_DATA, {"return-clause": False, "injunctive-relief": False})
        assert "Additional Provisions" not in html
        assert "<h2>5. Signatures</h2>" in html


class TestClauses:
    def test_unknown_clause_ids_are_ignored(self):
        html = render("nda", NDA_DATA, {"return-clause": True, "bogus-id": True})
        assert html.count("Return of Information") == 1
        assert "bogus-id" not in html
        assert "Injunctive Relief" not in html

    def test_clauses_follow_mapping_order(self):
        html = render(
            "business-contract",
            {},
            {"dispute-resolution": True, "termination": True},
        )
        assert html.index("Dispute Resolution") < html.index("Early Termination")

    def test_clauses_from_other_templates_are_skipped(self):
        html = render("employment-contract", {}, {"pet-policy": True})
        assert "Pet Policy" not in html
        assert "<h2>5. Additional Provisions</h2>" in html
        assert "<h2>6. Signatures</h2>" in html


class TestSignatures:
    def _blocks(self, html):
        return html.count('<div class="signature-block">')

    def test_nda_has_two_counterparties(self):
        html = render("nda", NDA_DATA)
        assert self._blocks(html) == 3
        assert '<div class="signature-label">Jane Doe</div>' in html
        assert '<div class="signature-label">Acme Corp</div>' in html
        assert '<div class="signature-label">Beta LLC</div>' in html

    @pytest.mark.parametrize(
        "document_type,label",
        [
            ("business-contract", "[Company Representative]"),
            ("rental-agreement", "[Landlord Name]"),
            ("employment-contract", "[Company Name]"),
            ("will-trust", "[Other Party]"),
            ("llc-formation", "[Other Party]"),
        ],
    )
    def test_single_counterparty(self, document_type, label):
        html = render(document_type, {})
        assert self._blocks(html) == 2
        assert f'<div class="signature-label">{label}</div>' in html

    def test_rental_landlord_name(self):
        html = render("rental-agreement", {"landlordName": "Pat Owner"})
        assert '<div class="signature-label">Pat Owner</div>' in html


class TestErrors:
    def test_unknown_type_raises(self):
        with pytest.raises(TemplateNotFoundError) as excinfo:
            render("lease-to-own", {"fullName": "Jane"})
        assert excinfo.value.document_type == "lease-to-own"
        assert "lease-to-own" in str(excinfo.value)

    def test_not_found_is_a_value_error(self):
        with pytest.raises(ValueError):
            generate_document("unknown")


# ===================================================================== #
#  Generated document record and ids                                      #
# ===================================================================== #

class TestGeneratedDocument:
    def test_record_fields(self):
        doc = render_document("nda", NDA_DATA, clock=fixed_clock, id_factory=fixed_id)
        assert doc.document_id == FIXED_ID
        assert doc.document_type == "nda"
        assert doc.title == "Non-Disclosure Agreement"
        assert doc.generated_at == FIXED_NOW
        assert doc.html.startswith('<div class="generated-document">')

    def test_record_is_immutable(self):
        doc = render_document("nda", NDA_DATA, clock=fixed_clock, id_factory=fixed_id)
        with pytest.raises(Exception):
            doc.html = "<p>changed</p>"

    def test_structure_is_stable_across_calls(self):
        first = render_document("nda", NDA_DATA, {"return-clause": True}, clock=lambda: datetime(2026, 3, 7))
        second = render_document("nda", NDA_DATA, {"return-clause": True}, clock=lambda: datetime(2026, 3, 8))
        assert first.document_id != second.document_id

        def strip(doc):
            return doc.html.replace(doc.document_id, "").replace(format_date(doc.generated_at), "")

        assert strip(first) == strip(second)

    def test_default_ids_are_fresh(self):
        first = render_document("nda", NDA_DATA)
        second = render_document("nda", NDA_DATA)
        assert first.document_id != second.document_id


class TestDocumentId:
    ID_RE = re.compile(r"^LA-[0-9A-Z]+-[0-9A-Z]{6}$")

    def test_format(self):
        for _ in range(50):
            assert self.ID_RE.match(new_document_id(datetime.now()))

    def test_timestamp_part(self):
        now = datetime(2026, 3, 7, 9, 30, 0)
        expected = to_base36(int(now.timestamp() * 1000)).upper()
        assert new_document_id(now).split("-")[1] == expected

    def test_base36(self):
        assert to_base36(0) == "0"
        assert to_base36(35) == "z"
        assert to_base36(36) == "10"
        assert to_base36(1295) == "zz"
        with pytest.raises(ValueError):
            to_base36(-1)


class TestFieldValues:
    def test_mapping_behaviour(self):
        fields = FieldValues({"fullName": "Jane", "count": 3, "empty": None})
        assert fields["count"] == "3"
        assert fields["empty"] == ""
        assert len(fields) == 3
        assert set(fields) == {"fullName", "count", "empty"}

    def test_provided_and_text(self):
        fields = FieldValues({"name": "  Jo  ", "blank": "  "})
        assert fields.provided("name") == "Jo"
        assert fields.provided("blank") is None
        assert fields.provided("missing") is None
        assert fields.text("blank", "[Name]") == "[Name]"

    def test_is_read_only(self):
        fields = FieldValues({"name": "Jo"})
        with pytest.raises(TypeError):
            fields["name"] = "Other"


# ===================================================================== #
#  Metadata                                                               #
# ===================================================================== #

class TestMetadata:
    def test_known_type(self):
        meta = get_document_metadata("llc-formation")
        assert meta.title == "Limited Liability Company Operating Agreement"
        assert meta.sections == 4
        assert meta.custom_clauses == 0
        assert meta.estimated_length == "5-8 pages"
        assert meta.complexity == "Complex"

    def test_nda(self):
        meta = get_document_metadata("nda")
        assert meta.custom_clauses == 2
        assert meta.complexity == "Simple"
        assert meta.estimated_length == "2-3 pages"

    def test_unknown_type_is_none(self):
        assert get_document_metadata("unknown") is None

    def test_default_tables(self):
        from legal_ally.template_engine.metadata import (
            estimate_document_length,
            get_complexity_level,
        )

        assert estimate_document_length("unknown") == "2-4 pages"
        assert get_complexity_level("unknown") == "Moderate"
