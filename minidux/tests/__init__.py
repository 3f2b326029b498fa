"""
Test suite for minidux.

Focus areas:
- Store bootstrap, dispatch and subscription
- Notification order and re-entrancy
- Reducer purity and totality
- Replay determinism
"""
