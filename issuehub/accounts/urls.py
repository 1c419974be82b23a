# ============================================
# accounts/urls.py
# ============================================
from django.urls import path

from accounts.views import LoginAPIView, MeAPIView, SignupAPIView

app_name = 'accounts'

urlpatterns = [
    path('signup/', SignupAPIView.as_view(), name='signup'),
    path('login/', LoginAPIView.as_view(), name='login'),
    path('me/', MeAPIView.as_view(), name='me'),
]
