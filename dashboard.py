import logging
from datetime import date, datetime

import pandas as pd
import streamlit as st

# Set page config must be the first Streamlit command
st.set_page_config(
    page_title="Payroll Keeper",
    page_icon="💰",
    layout="wide"
)

from src.calculator import compute_net_pay
from src.config import settings
from src.utils.api_client import APIClientError, PayrollAPIClient

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def get_client() -> PayrollAPIClient:
    """Client bound to the configured API and the admin key from the session."""
    return PayrollAPIClient(base_url=settings.API_URL, api_key=st.session_state.get('api_key'))


def is_admin() -> bool:
    return bool(st.session_state.get('api_key'))


def show_sidebar():
    """Admin key entry and connection info."""
    st.sidebar.title("💰 Payroll Keeper")

    if is_admin():
        st.sidebar.success("🔓 Admin mode")
        if st.sidebar.button("Logout"):
            st.session_state.api_key = None
            st.rerun()
    else:
        with st.sidebar.form("api_key_form", clear_on_submit=True):
            api_key = st.text_input("Admin API key", type="password")
            if st.form_submit_button("Unlock"):
                if api_key:
                    st.session_state.api_key = api_key
                    st.rerun()
                else:
                    st.error("Please enter the API key")
        st.sidebar.info("Viewing is public. Enter the admin key to add or delete records.")

    try:
        get_client().health()
        st.sidebar.caption(f"API: {settings.API_URL} ✅")
    except APIClientError as e:
        st.sidebar.error(f"API unreachable: {e.message}")


def show_employees_tab(client: PayrollAPIClient):
    """Employee list with add and delete actions."""
    st.subheader("👥 Employees")

    if is_admin():
        with st.expander("➕ Add New Employee"):
            with st.form("employee_form", clear_on_submit=True):
                col1, col2 = st.columns(2)
                with col1:
                    employee_code = st.text_input("Employee Code")
                    first_name = st.text_input("First Name")
                    last_name = st.text_input("Last Name")
                    designation = st.text_input("Designation")
                with col2:
                    department = st.text_input("Department")
                    email = st.text_input("Email")
                    bank_account = st.text_input("Bank Account")
                    salary = st.number_input("Salary", min_value=0.0, step=100.0, format="%.2f")

                if st.form_submit_button("💾 Save"):
                    try:
                        employee = client.create_employee({
                            'employee_code': employee_code,
                            'first_name': first_name,
                            'last_name': last_name,
                            'designation': designation,
                            'department': department,
                            'email': email,
                            'bank_account': bank_account,
                            'salary': salary,
                        })
                        st.success(f"Employee {employee['employee_code']} created successfully!")
                        st.rerun()
                    except APIClientError as e:
                        st.error(f"Error saving employee: {e.message}")

    try:
        employees = client.list_employees()
    except APIClientError as e:
        st.error(f"Failed to load employees: {e.message}")
        return

    if not employees:
        st.info("No employees found. Add a new employee to get started.")
        return

    df = pd.DataFrame(employees)
    df['name'] = df['first_name'] + ' ' + df['last_name']
    st.dataframe(
        df[['id', 'employee_code', 'name', 'designation', 'department', 'email', 'salary']],
        hide_index=True,
        use_container_width=True,
    )

    if is_admin():
        options = {f"{emp['employee_code']} - {emp['first_name']} {emp['last_name']}": emp['id']
                   for emp in employees}
        col1, col2 = st.columns([3, 1])
        with col1:
            selected = st.selectbox("Employee to delete", list(options), key="delete_employee")
        with col2:
            st.write("")
            if st.button("🗑️ Delete"):
                try:
                    result = client.delete_employee(options[selected])
                    st.success(f"{result['message']} ({result['deleted_payrolls']} payroll entries removed)")
                    st.rerun()
                except APIClientError as e:
                    st.error(f"Error deleting employee: {e.message}")


def show_payroll_tab(client: PayrollAPIClient):
    """Payroll entries with a create form."""
    st.subheader("🧾 Payroll")

    try:
        employees = client.list_employees()
        payrolls = client.list_payrolls()
    except APIClientError as e:
        st.error(f"Failed to load payroll data: {e.message}")
        return

    if is_admin():
        if not employees:
            st.info("Add an employee before creating payroll entries.")
        else:
            with st.expander("➕ Create Payroll Entry"):
                options = {f"{emp['employee_code']} - {emp['first_name']} {emp['last_name']}": emp['id']
                           for emp in employees}
                selected = st.selectbox("Employee", list(options), key="payroll_employee")
                today = date.today()
                col1, col2 = st.columns(2)
                with col1:
                    period_start = st.date_input("Pay Period Start", value=today.replace(day=1),
                                                 key="payroll_start")
                    gross_pay = st.number_input("Gross Pay", min_value=0.0, step=100.0, format="%.2f",
                                                key="payroll_gross_pay")
                with col2:
                    period_end = st.date_input("Pay Period End", value=today, key="payroll_end")
                    deductions = st.number_input("Deductions", min_value=0.0, step=10.0, format="%.2f",
                                                 key="payroll_deductions")

                st.caption(f"Net pay: {compute_net_pay(gross_pay, deductions):,.2f}")

                if st.button("💾 Create", key="create_payroll"):
                    try:
                        payroll = client.create_payroll({
                            'employee_id': options[selected],
                            'pay_period_start': period_start.isoformat(),
                            'pay_period_end': period_end.isoformat(),
                            'gross_pay': gross_pay,
                            'deductions': deductions,
                        })
                        st.success(f"Payroll entry #{payroll['id']} created (net pay {payroll['net_pay']:,.2f})")
                        st.rerun()
                    except APIClientError as e:
                        st.error(f"Error creating payroll entry: {e.message}")

    if not payrolls:
        st.info("No payroll entries found.")
        return

    names = {emp['id']: f"{emp['first_name']} {emp['last_name']}" for emp in employees}
    df = pd.DataFrame(payrolls)
    df['employee'] = df['employee_id'].map(names).fillna("Unknown")
    st.dataframe(
        df[['id', 'employee', 'pay_period_start', 'pay_period_end', 'gross_pay', 'deductions', 'net_pay']],
        hide_index=True,
        use_container_width=True,
    )

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Payroll Entries", len(df))
    with col2:
        st.metric("Total Gross Pay", f"{df['gross_pay'].sum():,.2f}")
    with col3:
        st.metric("Total Net Pay", f"{df['net_pay'].sum():,.2f}")


def show_payslip_tab(client: PayrollAPIClient):
    """Render the payslip for one payroll entry."""
    st.subheader("📄 Payslip")

    try:
        payrolls = client.list_payrolls()
    except APIClientError as e:
        st.error(f"Failed to load payroll entries: {e.message}")
        return

    if not payrolls:
        st.info("No payroll entries found.")
        return

    options = {f"#{p['id']} ({p['pay_period_start']} to {p['pay_period_end']})": p['id'] for p in payrolls}
    selected = st.selectbox("Payroll entry", list(options))

    try:
        payslip = client.get_payslip(options[selected])
    except APIClientError as e:
        st.error(f"Failed to load payslip: {e.message}")
        return

    payroll = payslip['payroll']
    employee = payslip['employee']

    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"**{employee['first_name']} {employee['last_name']}** ({employee['employee_code']})")
        st.write(f"{employee['designation']}, {employee['department']}")
        st.write(f"Email: {employee['email']}")
        st.write(f"Bank account: {employee['bank_account']}")
    with col2:
        st.write(f"Pay period: {payroll['pay_period_start']} to {payroll['pay_period_end']}")
        st.write(f"Issued: {datetime.fromisoformat(payroll['created_at'].replace('Z', '+00:00')):%Y-%m-%d}")

    st.table(pd.DataFrame([
        {"Item": "Gross Pay", "Amount": f"{payroll['gross_pay']:,.2f}"},
        {"Item": "Deductions", "Amount": f"{payroll['deductions']:,.2f}"},
        {"Item": "Net Pay", "Amount": f"{payroll['net_pay']:,.2f}"},
    ]))


def main():
    """Main entry point."""
    if 'api_key' not in st.session_state:
        st.session_state.api_key = None

    show_sidebar()

    st.title(f"💰 {settings.APP_NAME}")
    client = get_client()

    employees_tab, payroll_tab, payslip_tab = st.tabs(["Employees", "Payroll", "Payslip"])
    with employees_tab:
        show_employees_tab(client)
    with payroll_tab:
        show_payroll_tab(client)
    with payslip_tab:
        show_payslip_tab(client)


if __name__ == "__main__":
    main()
