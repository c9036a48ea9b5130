"""
Bugboard Backend — Services Layer
===================================

Service Inventory:
    - PipelineService (base.py): store deadline + failure translation
    - PostService: create/list/get/update/delete posts (owner-gated)
    - BugService:  create/list/get/update/delete bugs (no ownership)
    - normalize:   record → response conversion, identifiers → strings
"""
