"""
Report Audit - Level Report Safety Verification

Analyzes lists of non-negative integers parsed from plain text: a paired-list
distance/similarity analysis and a report safety verifier with a
single-fault-tolerant "problem dampener".
"""

__version__ = "0.1.0"
__author__ = "Report Audit Team"
