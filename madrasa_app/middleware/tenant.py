# middleware/tenant.py
from functools import partial

from django.utils.functional import SimpleLazyObject
from madrasa_app.models import Tenant
import logging

logger = logging.getLogger(__name__)

IGNORED_SUBDOMAINS = ('www', 'localhost')


def resolve_tenant(request):
    """
    Tenant for a request: X-Tenant-Id header, then subdomain, then custom
    domain, then the first active tenant. Inactive tenants never match.
    """
    tenant_header = request.META.get('HTTP_X_TENANT_ID', '').strip()
    if tenant_header.isdigit():
        tenant = Tenant.objects.filter(pk=int(tenant_header), is_active=True).first()
        if tenant:
            return tenant
        logger.warning(f"X-Tenant-Id {tenant_header} does not match an active tenant")

    host = request.get_host().split(':')[0].lower()

    subdomain = host.split('.')[0]
    if subdomain and subdomain not in IGNORED_SUBDOMAINS:
        tenant = Tenant.objects.filter(subdomain=subdomain, is_active=True).first()
        if tenant:
            return tenant

    if host:
        tenant = Tenant.objects.filter(domain=host, is_active=True).first()
        if tenant:
            return tenant

    return Tenant.objects.filter(is_active=True).order_by('created_at', 'id').first()


class TenantMiddleware:
    """Attaches ``request.tenant``; resolved on first access only"""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.tenant = SimpleLazyObject(partial(resolve_tenant, request))
        return self.get_response(request)
