"""Infrastructure layer for PassRule.

Default implementations of the collaborators the rule engine depends on:
message resolution and digest computation.
"""
