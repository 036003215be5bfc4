from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'flats'

# Router for ViewSets
router = DefaultRouter()
router.register(r'', views.FlatViewSet, basename='flat')

urlpatterns = [
    # Flat ViewSet routes
    # GET    /api/flats/                          - List flats (all for admin, own for resident)
    # POST   /api/flats/                          - Create flat (admin)
    # GET    /api/flats/{number}/                 - Get flat details
    #
    # Custom flat actions
    # GET    /api/flats/available/                - Unassigned flats (public)
    # GET    /api/flats/groups/                   - All groups with stats (admin)
    # GET    /api/flats/{number}/group/           - Flat's group with stats
    # POST   /api/flats/{number}/connect/         - Connect to other flats (admin)
    # PUT    /api/flats/{number}/clear-owner/     - Remove resident (admin)

    path('', include(router.urls)),
]
