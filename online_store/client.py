# online_store/client.py
import requests

from online_store.utils.logging import get_logger

logger = get_logger(__name__)


class StoreClientError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class StoreClient:
    """Klient HTTP do API sklepu, bez retry."""

    def __init__(self, base_url: str = "http://localhost:8080", timeout: int = 2):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def list_products(self) -> list:
        return self._request("GET", "/products")

    def get_product(self, product_id: int) -> dict:
        return self._request("GET", "/product", params={"id": product_id})

    def add_to_cart(self, customer_id: int, product_id: int, qty: int = 1) -> dict:
        return self._request(
            "POST",
            "/cart/add",
            json={"customerId": customer_id, "productId": product_id, "qty": qty},
        )

    def get_cart(self, customer_id: int) -> dict:
        return self._request("GET", "/cart", params={"customerId": customer_id})

    def checkout(self, customer_id: int) -> dict:
        return self._request("POST", "/checkout", json={"customerId": customer_id})

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        logger.info(f"StoreClient {method} {url}")

        resp = requests.request(method, url, timeout=self.timeout, **kwargs)
        if not resp.ok:
            try:
                message = resp.json().get("error", resp.text)
            except ValueError:
                message = resp.text
            raise StoreClientError(resp.status_code, message)
        return resp.json()
