import logging
from typing import List, Optional

from .database import Stores
from .exceptions import NotFoundError
from .inventory_models import License, LicenseStatus
from .store import text_matches

logger = logging.getLogger(__name__)


def get_all_licenses(stores: Stores, q: Optional[str] = None) -> List[License]:
    licenses = stores.licenses.list()
    if q:
        licenses = [l for l in licenses if text_matches(q, l.software_name, l.id, l.assigned_to, l.license_key)]
    return licenses

def get_license_by_id(stores: Stores, license_id: str) -> Optional[License]:
    return stores.licenses.get(license_id)

def add_license(stores: Stores, payload: dict) -> License:
    payload = dict(payload)
    if not payload.get("status"):
        payload["status"] = LicenseStatus.SIN_ASIGNAR
    lic = stores.licenses.add(payload)
    logger.info("created license", extra={"entity": lic.id})
    return lic

def update_license(stores: Stores, license_id: str, patch: dict) -> License:
    lic = stores.licenses.update(license_id, patch)
    if lic is None:
        raise NotFoundError("License", license_id)
    logger.info("updated license", extra={"entity": license_id, "fields": sorted(patch)})
    return lic

def delete_license(stores: Stores, license_id: str) -> None:
    if not stores.licenses.delete(license_id):
        raise NotFoundError("License", license_id)
    logger.info("deleted license", extra={"entity": license_id})
