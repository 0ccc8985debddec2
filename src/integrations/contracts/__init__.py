"""
Contracts (data models).

This folder defines the request/response shapes for the payment gateway integration:
- the transport interface every HTTP invoker implements
- the payment, its status and the service configuration
- registration and verification results

Both mock and real HTTP clients are driven through these contracts.
"""
