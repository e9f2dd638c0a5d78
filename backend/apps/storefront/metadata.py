# =============================================================================
# HANDMADE ART STOREFRONT: SEO Metadata Builder
# =============================================================================
# STATUS: Completo
# PURPOSE: Construir metadata SEO (canonical, hreflang, OpenGraph, Twitter)
# BUSINESS LOGIC:
# - El canonical usa el host real del request
# - Los alternates apuntan SIEMPRE al dominio canonico de cada idioma
# NEXT STEPS: Permitir imagen por producto cuando exista el catalogo
# =============================================================================

import logging

from django.conf import settings

from .domains import Locale, get_default_locale, get_domain_rules

logger = logging.getLogger(__name__)

DEFAULT_IMAGE = {
    'path': '/web-image.jpg',
    'width': 1024,
    'height': 1024,
    'type': 'image/jpeg',
}

SEO_COPY = {
    Locale.ES: {
        'title': 'Handmade Art | Arte costarricense hecho a mano que transforma vidas',
        'template': '%s | Handmade Art Costa Rica',
        'description': (
            'Compra arte hecho a mano en Costa Rica: espejos, chorreadores y piezas '
            'únicas con calidad real. Envíos a todo el país. Cada compra impulsa la '
            'reinserción social.'
        ),
        'keywords': [
            'arte hecho a mano',
            'artesanía hecha a mano',
            'arte costarricense',
            'artesanía costarricense',
            'arte tico',
            'arte tica',
            'chorreadores artesanales',
            'espejos artesanales',
            'hecho en Costa Rica',
            'regalos únicos',
            'impacto social',
        ],
        'image_alt': 'Handmade Art - Arte costarricense hecho a mano',
    },
    Locale.EN: {
        'title': 'Handmade Art | Costa Rican handmade art that changes lives',
        'template': '%s | Handmade Art',
        'description': (
            'Shop handmade art from Costa Rica: mirrors, coffee drippers and '
            'one-of-a-kind pieces with real quality. Fast nationwide delivery. '
            'Every purchase supports social reintegration.'
        ),
        'keywords': [
            'handmade art',
            'costa rican crafts',
            'handmade mirrors',
            'coffee drippers handmade',
            'made in Costa Rica',
            'one of a kind',
            'social impact',
        ],
        'image_alt': 'Handmade Art - Costa Rican handmade art',
    },
}


def get_site_url(headers=None):
    """
    Origen absoluto del request actual: x-forwarded-proto (o https) + host.
    Sin header host se usa STOREFRONT['SITE_URL'].
    """
    if headers:
        normalized = {str(name).lower(): value for name, value in headers.items()}
        host = (normalized.get('host') or '').strip()
        if host:
            proto = (normalized.get('x-forwarded-proto') or '').strip() or 'https'
            return f'{proto}://{host}'

    logger.debug('Request sin header host, usando SITE_URL de settings')
    return settings.STOREFRONT['SITE_URL']


def strip_locale_prefix(pathname, locales):
    """'/es/about' -> '/about', '/en' -> '/', '/espejos' queda igual"""
    segments = pathname.split('/', 2)
    if len(segments) > 1 and segments[1] in locales:
        rest = segments[2] if len(segments) > 2 else ''
        return f'/{rest}'
    return pathname


def language_alternates(locale, pathname, rules=None):
    """URLs hreflang por idioma sobre los dominios canonicos (+ x-default)"""
    rules = get_domain_rules() if rules is None else rules
    base_path = strip_locale_prefix(pathname, [rule.locale for rule in rules])
    suffix = '' if base_path == '/' else base_path

    languages = {}
    for rule in rules:
        languages[f'{rule.locale}-{rule.region}'] = f'https://{rule.domain}/{rule.locale}{suffix}'

    current = next((rule for rule in rules if rule.locale == locale), None)
    if current is not None:
        languages['x-default'] = languages[f'{current.locale}-{current.region}']
    return languages


def og_locale(locale, rules=None):
    rules = get_domain_rules() if rules is None else rules
    for rule in rules:
        if rule.locale == locale:
            return f'{rule.locale}_{rule.region}'
    return locale


def build_metadata(locale, pathname, title=None, description=None, image=None, headers=None):
    """
    Metadata SEO para una pagina.

    Args:
        locale: idioma de la pagina ('es' o 'en')
        pathname: ruta de la pagina, p.ej. '/es/search'
        title, description: sobrescriben los textos por defecto del idioma
        image: dict opcional con url, width, height, alt, type
        headers: headers del request actual (origen del canonical)
    """
    copy = SEO_COPY.get(locale) or SEO_COPY[get_default_locale()]
    site_url = get_site_url(headers)
    image = image or {}

    page_title = title or copy['title']
    page_description = description or copy['description']

    og_image = {
        'url': image.get('url') or DEFAULT_IMAGE['path'],
        'width': image.get('width') or DEFAULT_IMAGE['width'],
        'height': image.get('height') or DEFAULT_IMAGE['height'],
        'alt': image.get('alt') or copy['image_alt'],
        'type': image.get('type') or DEFAULT_IMAGE['type'],
    }
    # Asegurar URL absoluta para la imagen
    if og_image['url'].startswith('/'):
        og_image['url'] = f"{site_url}{og_image['url']}"

    if not pathname.startswith('/'):
        pathname = f'/{pathname}'
    canonical_url = f'{site_url}{pathname}'

    return {
        'metadata_base': site_url,
        'title': {
            'default': page_title,
            'template': copy['template'],
        },
        'description': page_description,
        'keywords': list(copy['keywords']),
        'alternates': {
            'canonical': canonical_url,
            'languages': language_alternates(locale, pathname),
        },
        'open_graph': {
            'title': page_title,
            'description': page_description,
            'url': canonical_url,
            'site_name': settings.STOREFRONT['SITE_NAME'],
            'images': [og_image],
            'locale': og_locale(locale),
            'type': 'website',
        },
        'twitter': {
            'card': 'summary_large_image',
            'title': page_title,
            'description': page_description,
            'images': [og_image['url']],
            'creator': settings.STOREFRONT['TWITTER_CREATOR'],
        },
        'robots': {
            'index': True,
            'follow': True,
            'max_image_preview': 'large',
        },
    }
