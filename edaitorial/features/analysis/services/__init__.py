"""
Analysis services

1. scoring.py - severity deductions, category scores, overall score and class
2. classifier.py - free-text issue type -> one of five categories
3. checking.py - one backend call -> CheckOutcome
4. fallback.py - rule-based tier, no network
5. suggestions.py - advisory messages from score and categories
6. analyzer.py - ContentAnalyzer, the end-to-end pipeline and fallback chain
"""
