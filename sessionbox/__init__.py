"""
SessionBox - Cookie Based Server-Side Sessions

Associates an opaque id, carried in a cookie, with a bag of per-client
properties persisted through a pluggable store.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- session: Per-request session context and dirty tracking
- storage: Session persistence (in-memory, Redis)
- middleware: Cookie handling and end-of-request reconciliation
- config: Server configuration
- api: Demo API models
"""

__version__ = "1.0.0"
