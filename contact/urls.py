from django.urls import path
from .views import ContactCreateView, ContactListView, ContactDetailView

urlpatterns = [
    path('',                    ContactCreateView.as_view(), name='contact_create'),
    path('messages/',           ContactListView.as_view(),   name='contact_messages'),
    path('messages/<int:pk>/',  ContactDetailView.as_view(), name='contact_message_detail'),
]
