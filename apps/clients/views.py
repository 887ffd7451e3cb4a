from django.db.models import Q
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from .models import Client
from .serializers import ClientSerializer, ClientDetailSerializer


class ClientViewSet(viewsets.ModelViewSet):
    """
    ViewSet for clients.

    list: All clients, alphabetical (optional ?search= on name or phone)
    create: Register a client
    retrieve: Client with its order history
    update / partial_update: Edit contact data
    destroy: Delete a client; their orders are kept without a client
    """

    queryset = Client.objects.all()
    serializer_class = ClientSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        queryset = super().get_queryset()
        search = self.request.query_params.get('search')
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) |
                Q(phone__contains=search)
            )
        return queryset

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return ClientDetailSerializer
        return ClientSerializer
