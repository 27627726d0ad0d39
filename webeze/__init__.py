"""Webeze.

Backend for Webeze, a multi-tenant website builder. Each account owns one or
more companies (tenants), every company is served from its own sub-domain and
carries a settings record.

Subpackages
-----------

- ``webeze.core``: entities, repositories, I/O models, security, logging and
  monitoring shared by everything else.
- ``webeze.server``: the FastAPI application, its routers, services,
  middleware and exception handlers.
"""
