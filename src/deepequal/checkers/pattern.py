"""Checker for compiled regular expressions (re.Pattern)"""

from ..properties import check_value_property


def check_pattern(config, left, right):
    return check_value_property(left, right, 'pattern') or check_value_property(left, right, 'flags')
