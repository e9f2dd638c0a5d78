import logging

from django.http import HttpResponse
from django.shortcuts import redirect
from django.template.loader import render_to_string
from django.views.decorators.http import require_safe
from rest_framework import status, permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from .domains import Locale, classify_locale, resolve_host
from .metadata import build_metadata
from .seo import render_robots, robots_policy, sitemap_entries
from .serializers import MetadataQuerySerializer, PageSerializer

logger = logging.getLogger(__name__)

# Titulos genericos de las paginas servidas por componentes externos
PAGE_TITLES = {
    'product': {Locale.ES: 'Producto', Locale.EN: 'Product'},
    'search': {Locale.ES: 'Resultados de búsqueda', Locale.EN: 'Search results'},
}

# =============================================================================
# REDIRECT DISPATCH - Terminan el request sin renderizar
# =============================================================================

@require_safe
def root_redirect(request):
    """
    Redirige '/' al idioma del dominio

    artehechoamano.com -> /es, handmadeart.store -> /en.
    Otros dominios o desarrollo local usan el idioma por defecto.
    """
    host = resolve_host(request.headers)
    locale = classify_locale(host)
    logger.debug('Root dispatch: host=%s -> /%s', host, locale)
    return redirect(f'/{locale}')


@require_safe
def pay_redirect(request, locale):
    """Entrada de pagos: siempre a /<locale>/pay/new, sin mirar el host"""
    logger.debug('Payment dispatch -> /%s/pay/new', locale)
    return redirect(f'/{locale}/pay/new')

# =============================================================================
# ROBOTS & SITEMAP
# =============================================================================

@require_safe
def robots_txt(request):
    host = resolve_host(request.headers)
    policy = robots_policy(host)
    return HttpResponse(render_robots(policy), content_type='text/plain; charset=utf-8')


@require_safe
def sitemap_xml(request):
    host = resolve_host(request.headers)
    content = render_to_string('storefront/sitemap.xml', {'entries': sitemap_entries(host)})
    return HttpResponse(content, content_type='application/xml; charset=utf-8')

# =============================================================================
# SEO METADATA API
# =============================================================================

@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def seo_metadata(request):
    """Metadata SEO para cualquier pagina del front end"""
    serializer = MetadataQuerySerializer(data=request.query_params)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    metadata = build_metadata(
        locale=data['locale'],
        pathname=data['pathname'],
        title=data.get('title'),
        description=data.get('description'),
        headers=request.headers,
    )
    return Response({'metadata': metadata})

# =============================================================================
# PAGE SHELLS - Delegan el render a componentes del front end
# =============================================================================

def _page_response(request, component, props, locale, pathname, title=None):
    metadata = build_metadata(
        locale=locale,
        pathname=pathname,
        title=title,
        headers=request.headers,
    )
    serializer = PageSerializer({
        'component': component,
        'props': props,
        'metadata': metadata,
    })
    return Response(serializer.data)


@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def home_page(request, locale):
    return _page_response(
        request,
        component='HomeContainer',
        props={'locale': locale},
        locale=locale,
        pathname=f'/{locale}',
    )


@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def product_page(request, locale, product_id):
    """Detalle de producto: el componente ProductDetail resuelve el id"""
    return _page_response(
        request,
        component='ProductDetail',
        props={'id': product_id, 'locale': locale},
        locale=locale,
        pathname=f'/{locale}/product/{product_id}',
        title=PAGE_TITLES['product'].get(locale),
    )


@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def search_page(request, locale):
    return _page_response(
        request,
        component='SearchResultsPage',
        props={'locale': locale},
        locale=locale,
        pathname=f'/{locale}/search',
        title=PAGE_TITLES['search'].get(locale),
    )
