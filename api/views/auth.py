from dj_rest_auth.views import LoginView as DjRestAuthLoginView
from rest_framework.permissions import AllowAny
from django.views.decorators.csrf import csrf_exempt
from django.utils.decorators import method_decorator


@method_decorator(csrf_exempt, name='dispatch')
class LoginView(DjRestAuthLoginView):
    """
    Login view issuing JWT access/refresh tokens, the JWT cookie and a session
    CSRF exempt to allow anyone to attempt login
    """
    authentication_classes = []  # No authentication - prevents session/CSRF checks
    permission_classes = [AllowAny]  # Allow unauthenticated access to login

    def get_response(self):
        """Override to add a status message to the token payload"""
        response = super().get_response()
        response.data['detail'] = 'Login successful'
        return response
