"""
Streamlit Frontend for Personal Ledger

This is the user interface for recording income and spending and for
planning investments.

DESIGN PRINCIPLES:
1. Simple, clear interface
2. The current balance is always visible
3. Declined operations are explained, never hidden
4. The UI only calls FinanceFlow - it never touches the account directly

Each browser session gets its own account, kept in st.session_state.
Nothing is persisted: closing the tab ends the session.
"""

from decimal import Decimal

import streamlit as st

from personal_ledger.config import get_settings, validate_all_settings
from personal_ledger.models.records import InvestmentKind, OperationResult
from personal_ledger.orchestrator import FinanceFlow, create_app_components
from personal_ledger.valuation import (
    FIXED_DEPOSIT_ANNUAL_RATE,
    RECURRING_PLAN_ANNUAL_RATE,
    quantize_money,
)


# Page configuration
st.set_page_config(
    page_title="Personal Ledger",
    page_icon="💰",
    layout="wide",
    initial_sidebar_state="expanded",
)


PAGES = [
    "🏠 Overview",
    "➕ Record Income",
    "➖ Record Expenditure",
    "📈 Make Investment",
    "📜 Transaction History",
    "💼 Investment Portfolio",
    "🔮 Maturity Projections",
    "🗒️ Activity Log",
    "⚙️ Settings",
]


def get_flow() -> FinanceFlow:
    """Get or create this session's FinanceFlow."""
    if "finance_flow" not in st.session_state:
        st.session_state.finance_flow = create_app_components()
    return st.session_state.finance_flow


def money(flow: FinanceFlow, value: Decimal) -> str:
    return f"{quantize_money(value):,.2f} {flow.currency_code}"


def show_result(flow: FinanceFlow, result: OperationResult, success_message: str):
    """Render the outcome of a money-moving operation."""
    if result.success:
        st.success(f"✅ {success_message} New balance: {money(flow, result.balance)}")
    elif result.error_code == "insufficient_funds":
        st.error(f"❌ {result.error_message}")
    else:
        st.warning(f"⚠️ {result.error_message}")


def main():
    """Main application entry point."""
    flow = get_flow()

    st.sidebar.title("💰 Personal Ledger")
    st.sidebar.metric("Current Balance", money(flow, flow.current_balance()))
    st.sidebar.caption(f"Minimum balance: {money(flow, flow.minimum_balance)}")
    st.sidebar.markdown("---")

    page = st.sidebar.radio("Navigate to:", PAGES, index=0)

    if page == "🏠 Overview":
        render_overview_page(flow)
    elif page == "➕ Record Income":
        render_income_page(flow)
    elif page == "➖ Record Expenditure":
        render_expenditure_page(flow)
    elif page == "📈 Make Investment":
        render_investment_page(flow)
    elif page == "📜 Transaction History":
        render_history_page(flow)
    elif page == "💼 Investment Portfolio":
        render_portfolio_page(flow)
    elif page == "🔮 Maturity Projections":
        render_projections_page(flow)
    elif page == "🗒️ Activity Log":
        render_activity_page(flow)
    elif page == "⚙️ Settings":
        render_settings_page()


def render_overview_page(flow: FinanceFlow):
    st.title("🏠 Overview")
    summary = flow.summary()

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Balance", money(flow, flow.current_balance()))
    col2.metric("Total Income", money(flow, summary.total_income))
    col3.metric("Total Spent", money(flow, summary.total_expenditure))
    col4.metric("Total Invested", money(flow, summary.total_invested))

    st.markdown(
        f"**{summary.transaction_count}** transactions and "
        f"**{summary.investment_count}** investments recorded this session."
    )


def render_income_page(flow: FinanceFlow):
    st.title("➕ Record Income")

    with st.form("income_form", clear_on_submit=True):
        amount = st.number_input(
            "Income amount",
            min_value=0.0,
            step=100.0,
            format="%.2f",
        )
        description = st.text_input(
            "Description",
            placeholder="e.g., Salary",
            max_chars=200,
        )
        submitted = st.form_submit_button("Record Income", type="primary")

    if submitted:
        result = flow.record_income(Decimal(str(amount)), description)
        show_result(flow, result, "Income recorded successfully.")


def render_expenditure_page(flow: FinanceFlow):
    st.title("➖ Record Expenditure")
    st.caption(
        f"Spending is declined if it would leave less than "
        f"{money(flow, flow.minimum_balance)}."
    )

    with st.form("expenditure_form", clear_on_submit=True):
        amount = st.number_input(
            "Expenditure amount",
            min_value=0.0,
            step=100.0,
            format="%.2f",
        )
        description = st.text_input(
            "Description",
            placeholder="e.g., Groceries",
            max_chars=200,
        )
        submitted = st.form_submit_button("Record Expenditure", type="primary")

    if submitted:
        result = flow.record_expenditure(Decimal(str(amount)), description)
        show_result(flow, result, "Expenditure recorded successfully.")


def render_investment_page(flow: FinanceFlow):
    st.title("📈 Make Investment")

    kind = st.radio(
        "Investment type",
        options=list(InvestmentKind),
        format_func=lambda k: (
            f"Recurring Plan ({RECURRING_PLAN_ANNUAL_RATE:.1%} p.a., monthly compounding)"
            if k == InvestmentKind.RECURRING_PLAN
            else f"Fixed Deposit ({FIXED_DEPOSIT_ANNUAL_RATE:.1%} p.a., annual compounding)"
        ),
    )

    with st.form("investment_form"):
        principal = st.number_input(
            "Principal amount to invest",
            min_value=0.0,
            step=500.0,
            format="%.2f",
        )
        duration = st.number_input(
            "Duration in years",
            min_value=1,
            max_value=50,
            value=1,
            step=1,
        )
        monthly = None
        if kind == InvestmentKind.RECURRING_PLAN:
            monthly = st.number_input(
                "Monthly investment amount",
                min_value=0.0,
                step=100.0,
                format="%.2f",
            )
        submitted = st.form_submit_button("Invest", type="primary")

    if submitted:
        result = flow.make_investment(
            kind,
            Decimal(str(principal)),
            int(duration),
            Decimal(str(monthly)) if monthly is not None else None,
        )
        show_result(flow, result, "Investment made successfully.")


def render_history_page(flow: FinanceFlow):
    st.title("📜 Transaction History")
    transactions = flow.list_transactions()

    if not transactions:
        st.info("No transactions yet. Record an income or expenditure first.")
        return

    st.dataframe(
        [
            {
                "Type": t.display_name,
                "Amount": float(quantize_money(t.amount)),
                "Description": t.description,
                "Recorded": t.recorded_at.strftime("%Y-%m-%d %H:%M"),
            }
            for t in transactions
        ],
        use_container_width=True,
        hide_index=True,
    )


def render_portfolio_page(flow: FinanceFlow):
    st.title("💼 Investment Portfolio")
    investments = flow.list_investments()

    if not investments:
        st.info("No investments yet. Use 'Make Investment' to add one.")
        return

    st.dataframe(
        [
            {
                "Type": i.display_name,
                "Principal": float(quantize_money(i.principal)),
                "Duration (yrs)": i.duration_years,
                "Monthly": (
                    float(quantize_money(i.monthly_contribution))
                    if i.kind == InvestmentKind.RECURRING_PLAN
                    else None
                ),
            }
            for i in investments
        ],
        use_container_width=True,
        hide_index=True,
    )


def render_projections_page(flow: FinanceFlow):
    st.title("🔮 Maturity Projections")
    projections = flow.projected_maturities()

    if not projections:
        st.info("No investments to project yet.")
        return

    for position, projection in enumerate(projections, start=1):
        investment = projection.investment
        with st.expander(
            f"Portfolio Item {position} ({investment.display_name}): "
            f"matures to {money(flow, projection.maturity_value)}",
            expanded=position == 1,
        ):
            col1, col2, col3 = st.columns(3)
            col1.metric("Maturity Value", money(flow, projection.maturity_value))
            col2.metric("Total Contributed", money(flow, projection.total_contributed))
            col3.metric("Projected Gain", money(flow, projection.projected_gain))

            points = flow.growth_schedule(investment.id)
            st.line_chart({"Value": [float(quantize_money(p.value)) for p in points]})
            st.caption("Value at the end of each year of the term (year 0 = today).")


def render_activity_page(flow: FinanceFlow):
    st.title("🗒️ Activity Log")
    limit = get_settings().app.activity_log_limit
    events = flow.recent_events(limit)

    for event in events:
        line = f"`{event.timestamp.strftime('%H:%M:%S')}` {event.description}"
        if event.severity.value == "warning":
            st.warning(f"{line} - {event.error_message}")
        else:
            st.markdown(line)


def render_settings_page():
    st.title("⚙️ Settings")

    st.markdown("### Configuration Status")
    status = validate_all_settings()
    for name, key in [("Ledger", "ledger"), ("Application", "app")]:
        if status.get(key, False):
            st.success(f"✅ {name} settings loaded")
        else:
            st.error(f"❌ {name} settings invalid: {status.get(f'{key}_error')}")

    st.markdown("---")
    st.markdown(
        "Set `LEDGER_INITIAL_BALANCE`, `LEDGER_MINIMUM_BALANCE` and "
        "`LEDGER_CURRENCY_CODE` in the environment or a `.env` file. "
        "Changes apply to new sessions."
    )


if __name__ == "__main__":
    main()
