from typing import Optional
from urllib.parse import quote_plus

from ..model.invoice import Invoice
from .base_service import BaseService


class InvoiceService(BaseService):
    model = Invoice

    def pdf(self, invoice: Invoice) -> bytes:
        """Download the rendered invoice as PDF bytes."""
        url = f"{self.url_for_resource(Invoice.REST_RESOURCE)}/{invoice.id}/pdf"
        response = self.do_http_get(url, headers={"Accept": "application/pdf"})
        return response.content

    def send(self, invoice: Invoice, email_address: Optional[str] = None) -> Invoice:
        """
        E-mail the invoice to the customer.

        Without ``email_address`` Intuit uses the invoice's BillEmail.
        """
        url = f"{self.url_for_resource(Invoice.REST_RESOURCE)}/{invoice.id}/send"
        if email_address:
            url = f"{url}?sendTo={quote_plus(email_address)}"
        response = self.do_http_post(url, headers={"Content-Type": "application/octet-stream"})
        return Invoice.from_xml(response.content)
