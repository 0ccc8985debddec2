"""
Real HTTP integration clients.

These clients communicate with the real Zarinpal gateway over HTTP.

Important:
- Must implement the same HttpServiceInvoker interface as the mock clients
- Must return the gateway's parsed JSON body untouched; mapping onto the
  payment contracts happens in src/integrations/policy/response_wrappers.py

Switching:
Pass either invoker to DefaultZarinpalPaymentSession; the session never
knows which one it got.
"""
