"""
Request plumbing shared by every QuickBooks resource service.

A service owns a ``requests.Session``, an intuitlib ``AuthClient`` that
supplies the bearer token, a realm id and a ``QboConfig``. Resource
services only set ``model``.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Type
from urllib.parse import quote_plus

import requests
from lxml import etree

from ..config import QboConfig
from ..credentials import refresh_auth_client
from ..exceptions import (
    AuthorizationFailure,
    Forbidden,
    IntuitRequestException,
    MissingRealmError,
    ServiceUnavailable,
)
from ..mixins import find_first, local_name, parse_xml
from ..model.base import Collection, QuickbooksEntity

logger = logging.getLogger(__name__)

XML_CONTENT_TYPE = "application/xml"

STATUS_EXCEPTIONS: Dict[int, Type[IntuitRequestException]] = {
    401: AuthorizationFailure,
    403: Forbidden,
    503: ServiceUnavailable,
    504: ServiceUnavailable,
}


def format_xml(value: Any, pretty: bool = True) -> str:
    """
    Render anything as a log-friendly string without ever raising.

    XML-looking input is re-indented when ``pretty`` is set; anything that
    fails to parse is returned in its plain string form.
    """
    try:
        if isinstance(value, etree._ElementTree):
            value = value.getroot()
        if isinstance(value, etree._Element):
            return etree.tostring(value, pretty_print=pretty, encoding="unicode")
        if value is None:
            return ""
        if isinstance(value, bytes):
            text = value.decode("utf-8", errors="replace")
        elif isinstance(value, str):
            text = value
        else:
            return str(value)
    except Exception:  # str() of an arbitrary object may raise
        return object.__repr__(value)

    if not pretty or not text.lstrip().startswith("<"):
        return text
    try:
        parser = etree.XMLParser(
            remove_blank_text=True, resolve_entities=False, no_network=True
        )
        root = etree.fromstring(text.encode("utf-8"), parser)
    except (etree.XMLSyntaxError, ValueError):
        return text
    return etree.tostring(root, pretty_print=True, encoding="unicode")


def parse_intuit_error(body: Any) -> Dict[str, Any]:
    """
    Pull the fault details out of an error response body.

    Bodies that are empty or not XML come back with the raw text as the
    detail instead of raising.
    """
    error: Dict[str, Any] = {
        "message": "",
        "detail": "",
        "type": None,
        "code": None,
        "element": None,
    }
    try:
        root = parse_xml(body or b"")
    except (etree.XMLSyntaxError, ValueError, TypeError):
        error["detail"] = format_xml(body, pretty=False)
        return error

    fault = find_first(root, "Fault")
    if fault is None:
        error["detail"] = format_xml(body, pretty=False)
        return error

    error["type"] = fault.get("type")
    error_element = find_first(fault, "Error")
    if error_element is not None:
        error["code"] = error_element.get("code")
        error["element"] = error_element.get("element")
        for child in error_element:
            if not isinstance(child.tag, str):
                continue
            name = local_name(child)
            if name == "Message":
                error["message"] = (child.text or "").strip()
            elif name == "Detail":
                error["detail"] = (child.text or "").strip()
    return error


def escape_query_value(value: Any) -> str:
    return str(value).replace("\\", "\\\\").replace("'", "\\'")


class BaseService:
    BASE_DOMAIN = "quickbooks.api.intuit.com"
    SANDBOX_DOMAIN = "sandbox-quickbooks.api.intuit.com"

    model: Optional[Type[QuickbooksEntity]] = None

    def __init__(
        self,
        realm_id: Any = None,
        auth_client: Any = None,
        config: Optional[QboConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.realm_id = realm_id
        self.auth_client = auth_client
        self.config = config or QboConfig()
        self.session = session or requests.Session()

    @classmethod
    def from_token_store(cls, store: Any, config: Optional[QboConfig] = None) -> "BaseService":
        """Build a service with freshly refreshed tokens from a token store."""
        config = config or QboConfig()
        auth_client, realm_id = refresh_auth_client(store, config)
        return cls(realm_id=realm_id, auth_client=auth_client, config=config)

    @property
    def company_id(self) -> Any:
        return self.realm_id

    @property
    def base_domain(self) -> str:
        return self.SANDBOX_DOMAIN if self.config.sandbox else self.BASE_DOMAIN

    def url_for_base(self) -> str:
        if self.realm_id is None or str(self.realm_id).strip() == "":
            raise MissingRealmError()
        return f"https://{self.base_domain}/v3/company/{self.realm_id}"

    def url_for_resource(self, resource: str) -> str:
        return f"{self.url_for_base()}/{resource}"

    def default_model_query(self) -> str:
        return f"SELECT * FROM {self._model().XML_NODE}"

    def url_for_query(self, query: Optional[str] = None) -> str:
        """
        Query endpoint URL with the query text form-encoded.

            >>> service.url_for_query("SELECT * FROM Customer where Name = 'John'")
            'https://quickbooks.api.intuit.com/v3/company/1234/query?query=SELECT+*+FROM+Customer+where+Name+%3D+%27John%27'
        """
        base = self.url_for_base()
        if query is None:
            query = self.default_model_query()
        return f"{base}/query?query={quote_plus(query, safe='*')}"

    # -- logging -----------------------------------------------------------

    def log(self, message: str, **extra: Any) -> None:
        if self.config.log:
            logger.info(message, extra=extra)

    def log_xml(self, value: Any) -> str:
        """Format ``value`` for the log and emit it when logging is on."""
        text = format_xml(value, pretty=self.config.log_xml_pretty_print)
        self.log("QuickBooks XML", xml=text)
        return text

    # -- HTTP --------------------------------------------------------------

    def _headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        merged = {"Content-Type": XML_CONTENT_TYPE, "Accept": XML_CONTENT_TYPE}
        token = getattr(self.auth_client, "access_token", None)
        if token:
            merged["Authorization"] = f"Bearer {token}"
        if headers:
            merged.update(headers)
        return merged

    def do_http(
        self,
        method: str,
        url: str,
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        self.log("QuickBooks request", method=method, url=url)
        if self.config.log and body is not None:
            self.log_xml(body)

        response = self.session.request(
            method,
            url,
            data=body.encode("utf-8") if body is not None else None,
            headers=self._headers(headers),
        )
        return self.check_response(response, request_xml=body)

    def do_http_get(
        self, url: str, headers: Optional[Dict[str, str]] = None
    ) -> requests.Response:
        return self.do_http("GET", url, headers=headers)

    def do_http_post(
        self, url: str, body: str = "", headers: Optional[Dict[str, str]] = None
    ) -> requests.Response:
        return self.do_http("POST", url, body=body, headers=headers)

    def check_response(self, response: Any, request_xml: Any = None) -> Any:
        """
        Return ``response`` if it succeeded, otherwise raise.

        Even a 2xx answer can carry a Fault, so successful XML bodies are
        inspected as well.
        """
        status = int(response.status_code)
        body = response.content
        self.log("QuickBooks response", status_code=status)
        headers = getattr(response, "headers", None) or {}
        if self.config.log and body and "xml" in headers.get("Content-Type", XML_CONTENT_TYPE):
            self.log_xml(body)

        if 200 <= status < 300:
            if self._is_fault(body):
                self._raise_request_exception(status, body, request_xml)
            return response
        self._raise_request_exception(status, body, request_xml)

    def _is_fault(self, body: Any) -> bool:
        if not body or not body.lstrip().startswith(b"<"):
            return False
        try:
            root = parse_xml(body)
        except etree.XMLSyntaxError:
            return False
        return find_first(root, "Fault") is not None

    def _raise_request_exception(self, status: int, body: Any, request_xml: Any) -> None:
        error = parse_intuit_error(body)
        if error["message"]:
            message = f"{error['message']}:\n\t{error['detail']}"
        else:
            message = f"HTTP Error Code: {status}, Msg: {error['detail']}"
        exception_class = STATUS_EXCEPTIONS.get(status, IntuitRequestException)
        raise exception_class(
            message,
            code=error["code"],
            detail=error["detail"],
            type=error["type"],
            element=error["element"],
            status_code=status,
            request_xml=request_xml,
            response_xml=body,
        )

    # -- resource operations -----------------------------------------------

    def _model(self) -> Type[QuickbooksEntity]:
        if self.model is None:
            raise NotImplementedError(f"{type(self).__name__} has no model")
        return self.model

    def _entity_from_response(self, response: requests.Response) -> QuickbooksEntity:
        return self._model().from_xml(response.content)

    def fetch_by_id(self, entity_id: Any) -> QuickbooksEntity:
        url = f"{self.url_for_resource(self._model().REST_RESOURCE)}/{entity_id}"
        return self._entity_from_response(self.do_http_get(url))

    def create(self, entity: QuickbooksEntity) -> QuickbooksEntity:
        url = self.url_for_resource(self._model().REST_RESOURCE)
        response = self.do_http_post(url, entity.to_xml_string())
        return self._entity_from_response(response)

    def update(self, entity: QuickbooksEntity, sparse: bool = False) -> QuickbooksEntity:
        url = self.url_for_resource(self._model().REST_RESOURCE)
        response = self.do_http_post(url, entity.to_xml_string(sparse=sparse))
        return self._entity_from_response(response)

    def delete(self, entity: QuickbooksEntity) -> bool:
        model = self._model()
        url = f"{self.url_for_resource(model.REST_RESOURCE)}?operation=delete"
        stub = model(id=entity.id, sync_token=entity.sync_token)
        response = self.do_http_post(url, stub.to_xml_string())
        deleted = find_first(parse_xml(response.content), model.XML_NODE)
        return deleted is not None and deleted.get("status") == "Deleted"

    def query(
        self, object_query: Optional[str] = None, page: int = 1, per_page: int = 20
    ) -> Collection:
        """Run one page of a query; ``page`` is 1-based."""
        object_query = object_query or self.default_model_query()
        start_position = (page - 1) * per_page + 1
        paged = f"{object_query} STARTPOSITION {start_position} MAXRESULTS {per_page}"
        response = self.do_http_get(self.url_for_query(paged))
        return self._parse_collection(response.content)

    def query_in_batches(
        self, object_query: Optional[str] = None, per_page: int = 1000
    ) -> Iterator[Collection]:
        page = 1
        while True:
            results = self.query(object_query, page=page, per_page=per_page)
            if results.count:
                yield results
            if results.count < per_page:
                return
            page += 1

    def all(self, per_page: int = 1000) -> List[QuickbooksEntity]:
        entries: List[QuickbooksEntity] = []
        for batch in self.query_in_batches(per_page=per_page):
            entries.extend(batch.entries)
        return entries

    def find_by(self, field: str, value: Any) -> Collection:
        model = self._model()
        schema_field = model.field_for(field)
        xml_name = schema_field.xml_name if schema_field else field
        return self.query(
            f"SELECT * FROM {model.XML_NODE} WHERE {xml_name} = '{escape_query_value(value)}'"
        )

    def _parse_collection(self, body: bytes) -> Collection:
        model = self._model()
        root = parse_xml(body)
        query_response = find_first(root, "QueryResponse")
        if query_response is None:
            return Collection()

        def int_attr(name: str) -> Optional[int]:
            raw = query_response.get(name)
            return int(raw) if raw is not None else None

        entries = [
            model.from_element(child)
            for child in query_response
            if isinstance(child.tag, str) and local_name(child) == model.XML_COLLECTION_NODE
        ]
        return Collection(
            entries=entries,
            start_position=int_attr("startPosition"),
            max_results=int_attr("maxResults"),
            total_count=int_attr("totalCount"),
        )
