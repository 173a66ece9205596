#
# Copyright (c) 2024-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import streamlit as st
import streamlit.components.v1 as components

import environ


# https://docs.streamlit.io/library/api-reference/utilities/st.set_page_config
def set_page_config(page_title, page_icon=":material/payments:", layout="centered", initial_sidebar_state="auto"):
    st.set_page_config(
        page_title=page_title,
        page_icon=page_icon,
        layout=layout,
        initial_sidebar_state=initial_sidebar_state,
        menu_items={
            "Get help": "https://github.com/LateGenXer/uk-payroll/discussions",
            "Report a Bug": "https://github.com/LateGenXer/uk-payroll/issues",
            "About": f"""UK take-home pay estimator.

https://github.com/LateGenXer/uk-payroll

Version {environ.get_version()}.
""",
        }
    )


def analytics_html():
    # An invisible test marker, used when testing to ensure a page ran till the end
    st.html('<span id="test-marker" style="display:none"></span>')

    if not environ.production:
        return

    # Use https://statcounter.com/ to understand which pages are being used.
    html = (
        '<script type="text/javascript">'
        'var sc_project=13036387; '
        'var sc_invisible=1; '
        'var sc_security="3699fd22"; '
        '</script>'
        '<script type="text/javascript" src="https://www.statcounter.com/counter/counter.js" async></script>'
    )

    components.html(html)


def footer():
    st.divider()
    st.caption(f'Disclaimer: estimates only. Do not rely on this tool for payroll/tax decisions; figures vary by tax code and other factors.  Version {environ.get_version()}.')
