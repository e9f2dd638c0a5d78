# backend/apps/storefront/tests/test_views.py
import pytest
from django.urls import reverse
from rest_framework import status


class TestRootRedirectView:

    @pytest.mark.parametrize('host, expected', [
        ('artehechoamano.com', '/es'),
        ('handmadeart.store', '/en'),
        ('unknown.test', '/es'),
    ])
    def test_redirects_by_host(self, api_client, host, expected):
        response = api_client.get(reverse('root-redirect'), HTTP_HOST=host)

        assert response.status_code == status.HTTP_302_FOUND
        assert response['Location'] == expected

    def test_forwarded_host_wins(self, api_client):
        """Detras del proxy el host interno no decide el idioma"""
        response = api_client.get(
            reverse('root-redirect'),
            HTTP_HOST='artehechoamano.com',
            HTTP_X_FORWARDED_HOST='handmadeart.store',
        )

        assert response['Location'] == '/en'

    def test_without_host_defaults_to_spanish(self, api_client):
        response = api_client.get('/')
        assert response['Location'] == '/es'

    def test_post_not_allowed(self, api_client):
        response = api_client.post(reverse('root-redirect'))
        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


class TestPayRedirectView:

    def test_redirects_to_new_payment(self, api_client):
        url = reverse('pay-redirect', kwargs={'locale': 'en'})
        assert url == '/en/pay'

        response = api_client.get(url)

        assert response.status_code == status.HTTP_302_FOUND
        assert response['Location'] == '/en/pay/new'

    def test_ignores_host(self, api_client, spanish_host):
        """El idioma viene de la URL, no del dominio"""
        url = reverse('pay-redirect', kwargs={'locale': 'en'})
        response = api_client.get(url, HTTP_HOST=spanish_host)

        assert response['Location'] == '/en/pay/new'

    def test_unsupported_locale_not_found(self, api_client):
        response = api_client.get('/fr/pay')
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestRobotsView:

    def _sitemaps(self, response):
        body = response.content.decode()
        return [line.split(': ', 1)[1] for line in body.splitlines() if line.startswith('Sitemap:')]

    def test_spanish_host(self, api_client, spanish_host):
        response = api_client.get(reverse('robots-txt'), HTTP_HOST=spanish_host)

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'].startswith('text/plain')
        assert self._sitemaps(response) == [
            'https://artehechoamano.com/sitemap.xml',
            'https://handmadeart.store/sitemap.xml',
        ]

    def test_english_host(self, api_client, english_host):
        response = api_client.get(reverse('robots-txt'), HTTP_HOST=english_host)

        assert self._sitemaps(response) == [
            'https://handmadeart.store/sitemap.xml',
            'https://artehechoamano.com/sitemap.xml',
        ]

    def test_policy_rules(self, api_client, spanish_host):
        response = api_client.get(reverse('robots-txt'), HTTP_HOST=spanish_host)
        body = response.content.decode()

        assert 'User-Agent: *' in body
        assert 'Allow: /' in body
        for prefix in ['/api/', '/admin/', '/_next/', '/auth/']:
            assert f'Disallow: {prefix}' in body


class TestSitemapView:

    def test_spanish_sitemap(self, api_client, spanish_host):
        response = api_client.get(reverse('sitemap-xml'), HTTP_HOST=spanish_host)
        body = response.content.decode()

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'].startswith('application/xml')
        assert '<loc>https://artehechoamano.com/es/about</loc>' in body
        assert 'hreflang="es-cr" href="https://artehechoamano.com/es/about"' in body
        assert 'hreflang="en-us" href="https://handmadeart.store/en/about"' in body

    def test_english_sitemap(self, api_client, english_host):
        response = api_client.get(reverse('sitemap-xml'), HTTP_HOST=english_host)
        body = response.content.decode()

        assert '<loc>https://handmadeart.store/en</loc>' in body
        assert 'hreflang="es-cr" href="https://artehechoamano.com/es/search"' in body
        assert '<priority>0.6</priority>' in body
        assert '<changefreq>monthly</changefreq>' in body


class TestSeoMetadataView:

    def test_metadata_success(self, api_client, english_host):
        response = api_client.get(
            reverse('seo-metadata'),
            {'locale': 'en', 'pathname': '/en/about', 'title': 'About us'},
            HTTP_HOST=english_host,
        )

        assert response.status_code == status.HTTP_200_OK
        metadata = response.data['metadata']
        assert metadata['title']['default'] == 'About us'
        assert metadata['alternates']['canonical'] == 'https://handmadeart.store/en/about'
        assert metadata['alternates']['languages']['es-CR'] == 'https://artehechoamano.com/es/about'

    def test_invalid_locale(self, api_client):
        response = api_client.get(reverse('seo-metadata'), {'locale': 'fr', 'pathname': '/fr'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'locale' in response.data

    def test_missing_pathname(self, api_client):
        response = api_client.get(reverse('seo-metadata'), {'locale': 'es'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'pathname' in response.data

    def test_pathname_normalized(self, api_client, spanish_host):
        response = api_client.get(
            reverse('seo-metadata'),
            {'locale': 'es', 'pathname': 'es/contact'},
            HTTP_HOST=spanish_host,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['metadata']['alternates']['canonical'] == 'https://artehechoamano.com/es/contact'


class TestPageViews:

    def test_home_page(self, api_client, spanish_host):
        response = api_client.get(reverse('home-page', kwargs={'locale': 'es'}), HTTP_HOST=spanish_host)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['component'] == 'HomeContainer'
        assert response.data['props'] == {'locale': 'es'}
        assert response.data['metadata']['alternates']['canonical'] == 'https://artehechoamano.com/es'

    def test_product_page(self, api_client, english_host):
        url = reverse('product-page', kwargs={'locale': 'en', 'product_id': 'espejo-42'})
        response = api_client.get(url, HTTP_HOST=english_host)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['component'] == 'ProductDetail'
        assert response.data['props'] == {'id': 'espejo-42', 'locale': 'en'}
        metadata = response.data['metadata']
        assert metadata['title']['default'] == 'Product'
        assert metadata['alternates']['canonical'] == 'https://handmadeart.store/en/product/espejo-42'

    def test_product_page_spanish_title(self, api_client, spanish_host):
        url = reverse('product-page', kwargs={'locale': 'es', 'product_id': '7'})
        response = api_client.get(url, HTTP_HOST=spanish_host)

        assert response.data['metadata']['title']['default'] == 'Producto'

    def test_search_page(self, api_client, spanish_host):
        response = api_client.get(reverse('search-page', kwargs={'locale': 'es'}), HTTP_HOST=spanish_host)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['component'] == 'SearchResultsPage'
        assert response.data['props'] == {'locale': 'es'}
        assert response.data['metadata']['title']['default'] == 'Resultados de búsqueda'

    def test_unknown_locale_page_not_found(self, api_client):
        response = api_client.get('/de/search')
        assert response.status_code == status.HTTP_404_NOT_FOUND
