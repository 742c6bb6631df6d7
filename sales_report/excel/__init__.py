"""Workbook reading and POS sheet row extraction."""
