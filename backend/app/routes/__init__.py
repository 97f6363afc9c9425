# Routes package init
"""
Store Admin Backend — API Routes Package
==========================================

What:  HTTP route handlers that accept requests and return responses.
How:   Each route module handles one resource family.

Route Inventory:
    - stores.py:    POST/GET /api/stores
    - entities.py:  POST/GET /api/{storeId}/billboards|categories|sizes|colors|products
    - dashboard.py: GET      /dashboard/{storeId}/{plural}   (display rows)
    - health.py:    GET      /health

Routes stay thin: read path/query/body, build the RequestContext, call a
service, return the result. Error responses are produced by the exception
handlers registered in main.py.
"""
