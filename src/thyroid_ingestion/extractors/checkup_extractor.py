# ============================================================================
# src/thyroid_ingestion/extractors/checkup_extractor.py
# ============================================================================
"""
Checkup Title Extraction

Names the examination on a non-panel record (ultrasound, pathology,
blood work...). Three strategies in priority order:
1. An explicit label such as "检查项目：甲状腺彩超"
2. A title-like line among the first lines of the report
3. The shortest short line containing a known checkup keyword
"""

import logging
import re
from typing import List, Optional

from ..processors.thyroid.utils.parsing import normalize_lines

logger = logging.getLogger(__name__)

LABEL_PATTERNS = [
    re.compile(r'检查项目[：:]\s*([^\n\r]{1,30})'),
    re.compile(r'医嘱名称[：:]\s*([^\n\r]{1,30})'),
    re.compile(r'项目名称[：:]\s*([^\n\r]{1,30})'),
    re.compile(r'检查名称[：:]\s*([^\n\r]{1,30})'),
]

TITLE_KEYWORDS = ["检查", "报告", "结果", "超声", "B超", "CT", "核磁", "X光", "血液", "病理"]

CHECKUP_KEYWORDS = [
    "B超", "超声", "彩超", "病理", "血液", "血常规", "甲功", "甲状腺",
    "CT", "核磁", "MRI", "X光", "胸片", "心电图", "脑电图", "内镜",
    "胃镜", "肠镜", "活检", "生化", "免疫", "尿液", "尿常规", "肝功",
    "肾功", "血糖",
]

TITLE_SEARCH_LINES = 5
TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 50
KEYWORD_LINE_MAX_LENGTH = 20


def _from_label(text: str) -> Optional[str]:
    for pattern in LABEL_PATTERNS:
        match = pattern.search(text)
        if match:
            name = match.group(1).strip()
            if name:
                return name
    return None


def _is_date_line(line: str) -> bool:
    return "年" in line and "月" in line and "日" in line


def _from_title(lines: List[str]) -> Optional[str]:
    for line in lines[:TITLE_SEARCH_LINES]:
        if not TITLE_MIN_LENGTH <= len(line) <= TITLE_MAX_LENGTH:
            continue
        if _is_date_line(line):
            continue
        if any(keyword in line for keyword in TITLE_KEYWORDS):
            return line
    return None


def _from_keywords(lines: List[str]) -> Optional[str]:
    candidates = [
        line for line in lines
        if len(line) <= KEYWORD_LINE_MAX_LENGTH
        and any(keyword in line for keyword in CHECKUP_KEYWORDS)
    ]
    if not candidates:
        return None
    # min() keeps the first of equally short lines
    return min(candidates, key=len)


def extract_checkup_name(text: str) -> str:
    """
    Extract the checkup name from OCR text.

    Returns:
        The checkup name, or "" when nothing matches
    """
    if not text:
        return ""

    name = _from_label(text)
    if name:
        logger.debug(f"Checkup name from label: '{name}'")
        return name

    lines = normalize_lines(text)

    name = _from_title(lines)
    if name:
        logger.debug(f"Checkup name from title line: '{name}'")
        return name

    name = _from_keywords(lines)
    if name:
        logger.debug(f"Checkup name from keyword line: '{name}'")
        return name

    logger.debug("No checkup name found")
    return ""
