from docreview.normalization.models import AppraisalReport
from docreview.rendering.lookups import display, severity_emphasis
from docreview.rendering.models import (
    Badge,
    BulletList,
    EmptyState,
    InfoItem,
    IssueCard,
    Panel,
    Table,
)


def render_appraisal_report(report: AppraisalReport) -> list[Panel]:
    """Map an appraisal report to its display panels."""
    return [
        _property_panel(report),
        _valuation_panel(report),
        _comparables_panel(report),
        _condition_panel(report),
        _risk_panel(report),
        _market_panel(report),
        _recommendations_panel(report),
    ]


def _property_panel(report: AppraisalReport) -> Panel:
    d = report.property_details
    return Panel(
        title="Property Details",
        icon="🏠",
        items=[
            InfoItem("Address", display(d.address), full_width=True),
            InfoItem("Property Type", display(d.property_type)),
            InfoItem("Square Footage", display(d.square_footage)),
            InfoItem("Lot Size", display(d.lot_size)),
            InfoItem("Year Built", display(d.year_built)),
            InfoItem("Bedrooms", display(d.bedrooms)),
            InfoItem("Bathrooms", display(d.bathrooms)),
            InfoItem("Garage Spaces", display(d.garage_spaces)),
        ],
    )


def _valuation_panel(report: AppraisalReport) -> Panel:
    v = report.valuation
    return Panel(
        title="Valuation",
        icon="💰",
        items=[
            InfoItem("Appraised Value", display(v.appraised_value), highlight=True),
            InfoItem("Appraisal Date", display(v.appraisal_date)),
            InfoItem("Effective Date", display(v.effective_date)),
            InfoItem("Purchase Price", display(v.purchase_price)),
            InfoItem("Price per Sq Ft", display(v.price_per_sq_ft)),
            InfoItem("Market Trend", display(v.market_trend)),
            InfoItem("Days on Market", display(v.days_on_market)),
        ],
    )


def _comparables_panel(report: AppraisalReport) -> Panel:
    comparables = report.comparables
    if not comparables:
        return Panel(
            title="Comparable Sales",
            icon="📍",
            count=0,
            empty_state=EmptyState("No comparable sales found"),
        )
    return Panel(
        title="Comparable Sales",
        icon="📍",
        count=len(comparables),
        table=Table(
            headers=[
                "Address",
                "Sale Price",
                "Sale Date",
                "Sq Ft",
                "Beds",
                "Baths",
                "Price/Sq Ft",
                "Proximity",
                "Adjustments",
            ],
            rows=[
                [
                    display(c.address),
                    display(c.sale_price),
                    display(c.sale_date),
                    display(c.square_footage),
                    display(c.bedrooms),
                    display(c.bathrooms),
                    display(c.price_per_sq_ft),
                    display(c.proximity),
                    display(c.adjustments),
                ]
                for c in comparables
            ],
        ),
    )


def _condition_panel(report: AppraisalReport) -> Panel:
    c = report.condition_assessment
    if c.repairs_needed:
        repairs = BulletList("Repairs Needed", [display(r) for r in c.repairs_needed])
        empty_state = None
    else:
        repairs = None
        empty_state = EmptyState("No repairs needed", icon="✓", positive=True)
    return Panel(
        title="Condition Assessment",
        icon="🔧",
        items=[
            InfoItem("Overall Condition", display(c.overall_condition), highlight=True),
            InfoItem("Exterior", display(c.exterior_condition), full_width=True),
            InfoItem("Interior", display(c.interior_condition), full_width=True),
            InfoItem("Roof", display(c.roof_condition)),
            InfoItem("Foundation", display(c.foundation_condition)),
            InfoItem("Estimated Repair Cost", display(c.estimated_repair_cost)),
        ],
        lists=[repairs] if repairs is not None else [],
        empty_state=empty_state,
    )


def _risk_panel(report: AppraisalReport) -> Panel:
    r = report.risk_assessment
    overall = display(r.overall_risk)
    return Panel(
        title="Risk Assessment",
        icon="⚠️",
        count=len(r.risk_factors),
        items=[InfoItem("Overall Risk", overall, highlight=True)],
        cards=[
            IssueCard(
                heading=display(f.factor),
                badge=Badge(display(f.severity), severity_emphasis(f.severity)),
                description=display(f.description),
            )
            for f in r.risk_factors
        ],
        empty_state=(
            None
            if r.risk_factors
            else EmptyState("No risk factors identified", icon="✓", positive=True)
        ),
    )


def _market_panel(report: AppraisalReport) -> Panel:
    m = report.market_analysis
    return Panel(
        title="Market Analysis",
        icon="📈",
        items=[
            InfoItem("Market Conditions", display(m.market_conditions), highlight=True),
            InfoItem("Supply & Demand", display(m.supply_demand), full_width=True),
            InfoItem("Median Sale Price", display(m.median_sale_price)),
            InfoItem("Average Days on Market", display(m.average_days_on_market)),
            InfoItem("Price Appreciation", display(m.price_appreciation)),
            InfoItem("Inventory", display(m.inventory)),
        ],
    )


def _recommendations_panel(report: AppraisalReport) -> Panel:
    if not report.recommendations:
        return Panel(
            title="Recommendations",
            icon="✅",
            count=0,
            empty_state=EmptyState("No recommendations provided"),
        )
    return Panel(
        title="Recommendations",
        icon="✅",
        count=len(report.recommendations),
        lists=[BulletList("", [display(r) for r in report.recommendations])],
    )
