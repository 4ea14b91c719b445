"""RIASEC scoring and organisational analytics engine.

Sub-modules:
- scoring       – selection → score vector → profile code
- job_matcher   – profile code → job suggestions (exact → partial → generic)
- charts        – radar chart data points
- report        – structured result report
- org_tree      – pre-order walk over the organisation chart
- culture       – declared vs. lived culture values
- climate       – climate survey aggregates, global and per unit
- compatibility – pairwise person fit
- leadership    – alignment index across reporting lines
- org_context   – a person's position in the organisation
"""
