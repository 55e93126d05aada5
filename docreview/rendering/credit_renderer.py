from docreview.normalization.models import CreditReport
from docreview.rendering.lookups import display, severity_emphasis
from docreview.rendering.models import (
    NOT_AVAILABLE,
    Badge,
    BulletList,
    EmptyState,
    InfoItem,
    IssueCard,
    Panel,
    Table,
)


def render_credit_report(report: CreditReport) -> list[Panel]:
    """Map a credit report to its display panels."""
    return [
        _personal_info_panel(report),
        _credit_summary_panel(report),
        _payment_history_panel(report),
        _accounts_panel(report),
        _inquiries_panel(report),
        _public_records_panel(report),
        _collections_panel(report),
        _validation_issues_panel(report),
    ]


def _personal_info_panel(report: CreditReport) -> Panel:
    info = report.personal_info
    lists = []
    if info.previous_addresses:
        lists.append(
            BulletList("Previous Addresses", [display(a) for a in info.previous_addresses])
        )
    return Panel(
        title="Personal Information",
        icon="👤",
        items=[
            InfoItem("Name", display(info.name)),
            InfoItem("SSN", display(info.ssn)),
            InfoItem("Date of Birth", display(info.date_of_birth)),
            InfoItem("Current Address", display(info.current_address), full_width=True),
            InfoItem("Employment", display(info.employment_info), full_width=True),
        ],
        lists=lists,
    )


def _credit_summary_panel(report: CreditReport) -> Panel:
    s = report.credit_summary
    return Panel(
        title="Credit Summary",
        icon="📊",
        items=[
            InfoItem("Credit Score", display(s.credit_score), highlight=True),
            InfoItem("Score Date", display(s.score_date)),
            InfoItem("Total Accounts", display(s.total_accounts)),
            InfoItem("Open Accounts", display(s.open_accounts)),
            InfoItem("Closed Accounts", display(s.closed_accounts)),
            InfoItem("Derogatory Marks", display(s.derogatory_marks)),
            InfoItem("Total Inquiries", display(s.total_inquiries)),
            InfoItem("Oldest Account", display(s.oldest_account)),
            InfoItem("Average Account Age", display(s.average_account_age)),
            InfoItem("Total Credit Limit", display(s.total_credit_limit)),
            InfoItem("Total Balance", display(s.total_balance)),
            InfoItem("Credit Utilization", display(s.credit_utilization), highlight=True),
        ],
    )


def _payment_history_panel(report: CreditReport) -> Panel:
    h = report.payment_history
    return Panel(
        title="Payment History",
        icon="💳",
        items=[
            InfoItem("On-Time Payments", display(h.on_time_payments), highlight=True),
            InfoItem("30 Days Late", display(h.late_payments_30_days)),
            InfoItem("60 Days Late", display(h.late_payments_60_days)),
            InfoItem("90+ Days Late", display(h.late_payments_90_days)),
            InfoItem("Total Missed", display(h.total_missed_payments)),
        ],
    )


def _accounts_panel(report: CreditReport) -> Panel:
    accounts = report.credit_accounts
    if not accounts:
        return Panel(
            title="Credit Accounts",
            icon="🏦",
            count=0,
            empty_state=EmptyState("No credit accounts found"),
        )
    rows = []
    for account in accounts:
        payment_history = display(account.payment_history)
        rows.append([
            display(account.creditor_name),
            display(account.account_type),
            f"****{display(account.account_number)}",
            Badge(
                display(account.status),
                "success" if account.status == "Open" else "secondary",
            ),
            display(account.balance),
            display(account.credit_limit),
            display(account.monthly_payment),
            display(account.opened_date),
            Badge(payment_history, "success" if "Current" in payment_history else "error"),
        ])
    return Panel(
        title="Credit Accounts",
        icon="🏦",
        count=len(accounts),
        table=Table(
            headers=[
                "Creditor",
                "Type",
                "Account #",
                "Status",
                "Balance",
                "Credit Limit",
                "Monthly Payment",
                "Opened",
                "Payment History",
            ],
            rows=rows,
        ),
    )


def _inquiries_panel(report: CreditReport) -> Panel:
    inquiries = report.credit_inquiries
    if not inquiries:
        return Panel(
            title="Credit Inquiries",
            icon="🔍",
            count=0,
            empty_state=EmptyState("No credit inquiries found"),
        )
    return Panel(
        title="Credit Inquiries",
        icon="🔍",
        count=len(inquiries),
        table=Table(
            headers=["Creditor", "Date", "Type"],
            rows=[
                [
                    display(i.creditor),
                    display(i.date),
                    Badge(display(i.type), "warning" if i.type == "Hard" else "info"),
                ]
                for i in inquiries
            ],
        ),
    )


def _public_records_panel(report: CreditReport) -> Panel:
    records = report.public_records
    if not records:
        return Panel(
            title="Public Records",
            icon="⚖️",
            count=0,
            empty_state=EmptyState("No public records found", icon="✓", positive=True),
        )
    rows = []
    for r in records:
        court_info = display(r.court_info)
        rows.append([
            display(r.type),
            display(r.date),
            display(r.amount),
            Badge(display(r.status), "error"),
            "-" if court_info == NOT_AVAILABLE else court_info,
        ])
    return Panel(
        title="Public Records",
        icon="⚖️",
        count=len(records),
        table=Table(headers=["Type", "Date", "Amount", "Status", "Court Info"], rows=rows),
    )


def _collections_panel(report: CreditReport) -> Panel:
    collections = report.collections
    if not collections:
        return Panel(
            title="Collections",
            icon="⚠️",
            count=0,
            empty_state=EmptyState("No collections found", icon="✓", positive=True),
        )
    return Panel(
        title="Collections",
        icon="⚠️",
        count=len(collections),
        table=Table(
            headers=["Creditor", "Collection Agency", "Amount", "Date", "Status"],
            rows=[
                [
                    display(c.creditor),
                    display(c.collection_agency),
                    display(c.amount),
                    display(c.date),
                    Badge(display(c.status), "success" if c.status == "Paid" else "warning"),
                ]
                for c in collections
            ],
        ),
    )


def _validation_issues_panel(report: CreditReport) -> Panel:
    issues = report.validation_issues
    if not issues:
        return Panel(
            title="Validation Issues",
            icon="🔴",
            count=0,
            empty_state=EmptyState("No validation issues found", icon="✓", positive=True),
        )
    return Panel(
        title="Validation Issues",
        icon="🔴",
        count=len(issues),
        cards=[
            IssueCard(
                heading=display(issue.section),
                badge=Badge(display(issue.severity), severity_emphasis(issue.severity)),
                description=display(issue.issue),
                recommendation=display(issue.recommendation),
            )
            for issue in issues
        ],
    )
