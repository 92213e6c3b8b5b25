"""
Couche adaptateurs (infrastructure).

- api/ : client HTTP fanart.tv (httpx)
"""
