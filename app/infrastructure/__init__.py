"""Infrastructure modules for the visit tracker.

Centralized infrastructure components:
- configuration: Settings management (Settings, VisitorConfig)
- logging: Structured logging and request context
- operations: Operation results and error classification
- clients: Outbound service clients (ip-api.com)
- services: Dependency injection services (SettingsDep, VisitorConfigDep, get_settings)
"""
