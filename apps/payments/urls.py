from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'payments'

# Router for ViewSets
router = DefaultRouter()
router.register(r'', views.PaymentViewSet, basename='payment')

urlpatterns = [
    # Payment ViewSet routes
    # GET    /api/payments/               - List payments
    # POST   /api/payments/               - Record a payment
    # DELETE /api/payments/{id}/          - Delete a payment (admin)

    # Additional endpoints (before the router so they are not taken as ids)
    path('flat/<str:flat_number>/', views.flat_payments, name='flat-payments'),
    path('summary/', views.collection_summary, name='collection-summary'),

    path('', include(router.urls)),
]
