"""
Thyroid function panel processing: positional matching with a sequential
fallback over normalized OCR lines.
"""
