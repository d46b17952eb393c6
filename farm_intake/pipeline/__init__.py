"""
Rule pipeline module.

Runs a request through the fixed chain PermissionGate -> NonRegularAnnotator ->
HighPriorityAnnotator -> WeekendAnnotator -> InactiveAnnotator -> LocationFinalizer,
stopping at the first stage that signals STOP.
"""
