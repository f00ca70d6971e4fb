"""
Test suite for the component core.

Focus areas:
- Persistent collections never mutate in place
- Reducer merge semantics (object and primitive paths)
- Action surface and currying
- Host dispatch ordering and replay
"""
