"""
Overseer Root Module

Overseer tracks which software version runs in which deployment instance,
sourcing versions from the Nomad event stream.

Layer Structure:
- Domain: Catalog and deployment entities, repository and gateway contracts
- Application: Use cases (catalog, registration, version stream) and DTOs
- Infrastructure: MongoDB persistence, Nomad event stream, health checks
- Presentation: FastAPI controllers for the REST API
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, entry points and configuration
"""
