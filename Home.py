#
# Copyright (c) 2023-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import io

import streamlit as st

import common
import environ

from payroll import payroll_from_annual_salary, parse_money, format_gbp
from report import TextReport
from tax.uk import TAX_YEARS


environ.configure_logging()


common.set_page_config(
    page_title="UK Payroll",
    layout="centered",
    initial_sidebar_state="expanded"
)

st.title("UK Payroll")

st.markdown('Annual salary → estimated take-home (PAYE + Employee NI).')


#
# Parameters
#

default_salary = '50000'
default_tax_year = TAX_YEARS[0]

if 'salary' not in st.session_state:
    st.session_state.salary = default_salary
if 'tax_year' not in st.session_state:
    st.session_state.tax_year = default_tax_year


def reset():
    st.session_state.salary = default_salary
    st.session_state.tax_year = default_tax_year


with st.container(border=True):
    tax_year = st.selectbox('Tax year', TAX_YEARS, key='tax_year')
    salary = st.text_input('Annual salary (gross)', key='salary', placeholder='e.g. 50000')

    st.caption('Assumes England/Wales/NI income tax bands. No pension, student loan, or benefits.')


#
# Calculation
#

result = payroll_from_annual_salary(tax_year, parse_money(salary))

for note in result.notes:
    st.warning(note, icon="⚠️")


#
# Output
#

st.subheader('Summary')

col1, col2, col3 = st.columns(3)
col1.metric('Gross (annual)', format_gbp(result.gross_annual))
col2.metric('Income tax (annual)', format_gbp(result.income_tax_annual))
col3.metric('National Insurance (annual)', format_gbp(result.ni_annual))

col1, col2, col3 = st.columns(3)
col1.metric('Net pay (annual)', format_gbp(result.net_annual))
col2.metric('Net pay (monthly)', format_gbp(result.net_monthly))
col3.metric('Take-home', f'{result.take_home_pct:.1f}%')

st.subheader('Details')

col1, col2 = st.columns(2)
col1.metric('Personal allowance', format_gbp(result.personal_allowance))
col2.metric('Taxable income', format_gbp(result.taxable_annual))

st.caption('Personal allowance tapers down above £100,000, losing £1 for every £2 of income, until it reaches £0.')

st.button(f'Reset to £50,000 ({default_tax_year})', key='reset', on_click=reset)

with st.expander('Report'):
    text = io.StringIO()
    result.write(TextReport(text))
    st.markdown('```\n' + text.getvalue() + '```\n')


common.footer()
common.analytics_html()
