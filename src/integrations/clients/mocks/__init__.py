"""
Mock integration clients.

These clients return fake (but realistic) gateway responses without calling any external API.
They are used when:
- Zarinpal merchant credentials are not available
- We want to test the payment flow end-to-end without external dependencies

Important:
- Mock clients must follow the SAME HttpServiceInvoker interface as real HTTP clients.
- Mock responses must be shaped like the real WebGate JSON bodies.
"""
