# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import logging
from datetime import date

import pytest

from thyroid_ingestion.core import IndicatorExtractionEngine


@pytest.fixture
def engine():
    """Engine with default catalog and settings"""
    return IndicatorExtractionEngine()


@pytest.fixture
def stacked_panel_lines():
    """OCR output where every table cell became its own line"""
    return ["FT3", "5.27", "FT4", "21.10", "TSH", "0.565", "TPO", "81.20", "TG", "<1.3"]


@pytest.fixture
def stacked_panel_text(stacked_panel_lines):
    return "\n".join(stacked_panel_lines)


@pytest.fixture
def tabular_panel_text():
    """Row-per-line report with units and reference ranges"""
    return """
    XX市第一人民医院检验报告单
    检查日期：2024-03-15
    项目 结果 单位 参考范围
    游离三碘甲状腺原氨酸(FT3) 4.12 pmol/L 2.77-6.31
    游离甲状腺素(FT4) 15.80 pmol/L 10.44-24.38
    促甲状腺激素(TSH) 2.345 μIU/mL 0.380-4.340
    甲状腺过氧化物酶自身抗体(A-TPO) 12.60 IU/mL 0-60
    甲状腺球蛋白自身抗体(A-TG) <1.30 IU/mL 0-4.5
    """


@pytest.fixture
def unlabeled_values_text():
    """Labels lost by OCR, values in report order"""
    return "\n".join(["5.27", "21.10", "0.565", "81.20", "<1.3"])


@pytest.fixture
def fixed_today():
    return date(2025, 6, 1)


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep matcher debug chatter out of test output"""
    logging.getLogger("thyroid_ingestion").setLevel(logging.INFO)
    yield
