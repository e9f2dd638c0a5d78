from django.urls import path, include

urlpatterns = [
    # El storefront responde en la raiz de ambos dominios
    path('', include('apps.storefront.urls')),
]
