from django.urls import path, register_converter

from . import views
from .converters import LocaleConverter

register_converter(LocaleConverter, 'locale')

# =============================================================================
# HANDMADE ART STOREFRONT: URL Structure
# =============================================================================
# Rutas sin slash final para coincidir con las URLs publicas del front end
# (/es, /en/pay, /es/product/<id>)
# =============================================================================

urlpatterns = [
    # Dispatch por dominio y archivos SEO
    path('', views.root_redirect, name='root-redirect'),                       # GET: / -> /es | /en
    path('robots.txt', views.robots_txt, name='robots-txt'),                  # GET: politica de robots
    path('sitemap.xml', views.sitemap_xml, name='sitemap-xml'),               # GET: sitemap bi-dominio

    # API de metadata SEO
    path('api/seo/metadata/', views.seo_metadata, name='seo-metadata'),       # GET: metadata por pagina

    # Paginas por idioma
    path('<locale:locale>', views.home_page, name='home-page'),                            # GET: inicio
    path('<locale:locale>/pay', views.pay_redirect, name='pay-redirect'),                  # GET: -> /<locale>/pay/new
    path('<locale:locale>/product/<str:product_id>', views.product_page, name='product-page'),  # GET: detalle
    path('<locale:locale>/search', views.search_page, name='search-page'),                # GET: resultados
]
