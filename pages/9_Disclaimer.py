#
# Copyright (c) 2023-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import streamlit as st

import common


common.set_page_config(
    page_title="Disclaimer",
    layout="centered",
    initial_sidebar_state="expanded",
)

st.title('Disclaimer')

st.html("<style>.stMarkdown { text-align: justify; }</style>")

st.markdown('''
The figures shown on this site are estimates for general informational purposes only, and are not a substitute for a payslip or for professional advice.
Do not rely on them for payroll or tax decisions.

The estimates assume England, Wales and Northern Ireland income tax bands, a standard tax code, and employee Class 1 National Insurance only.
Scottish income tax, pension contributions, student loan repayments, benefits in kind, and other tax codes (e.g., K, BR, D0) are not taken into account.

National Insurance thresholds are approximate annual equivalents.
Where rates changed during a tax year (2022/23 and 2023/24) a single blended rate is used for the whole year.

THE USE OR RELIANCE OF ANY INFORMATION CONTAINED ON THE SITE IS SOLELY AT YOUR OWN RISK.
''')

common.analytics_html()
