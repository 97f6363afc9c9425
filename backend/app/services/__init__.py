# Services package init
"""
Store Admin Backend — Services Layer
=====================================

What:  The ownership-scoped CRUD request contract, split into its steps.

Service Inventory:
    - validation:  ordered required-field checks (first violation wins)
    - ownership:   subject → Store binding (401 / 422 / 403)
    - entities:    EntityDefinition catalogue for the five store resources
    - entity_service: generic create/list pipeline driven by a definition
    - store_service:  store creation and listing for the current subject
    - presenter:   record → display row mapping for dashboard tables
"""
