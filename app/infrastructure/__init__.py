"""Infrastructure modules for the IP Lookup Service.

Centralized infrastructure components:
- configuration: Settings management
- logging: Structured logging setup and request context binding
- operations: Operation results and upstream error classification
- clients: Upstream provider clients (ip-api, public IP discovery)
- services: Dependency injection providers (get_settings, SettingsDep)
"""
