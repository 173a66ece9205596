#
# Copyright (c) 2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import os.path

import pytest

try:
    from streamlit.testing.v1 import AppTest
except ImportError:
    pytest.skip("No Streamlit; skipping.", allow_module_level=True)


root_dir = os.path.join(os.path.dirname(__file__), os.pardir)

default_timeout = 30


@pytest.fixture(scope="function")
def at():
    at = AppTest.from_file(os.path.join(root_dir, "Home.py"), default_timeout=default_timeout)
    at.switch_page('pages/1_Tax_Years.py')
    at.run()
    assert not at.exception
    return at


def test_run(at):
    # Ensure no state corruption
    at.run()
    assert not at.exception


def test_table(at):
    assert len(at.dataframe) == 1
    df = at.dataframe[0].value
    assert list(df['year']) == ['2024/25', '2023/24', '2022/23', '2021/22', '2020/21', '2019/20']


def test_max_salary(at):
    at.slider(key="max_salary").set_value(300000)
    at.run()
    assert not at.exception


def test_disclaimer():
    at = AppTest.from_file(os.path.join(root_dir, "Home.py"), default_timeout=default_timeout)
    at.switch_page('pages/9_Disclaimer.py')
    at.run()
    assert not at.exception
    assert at.title[0].value == 'Disclaimer'
