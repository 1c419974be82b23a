# ============================================
# accounts/views.py
# ============================================
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import caller_from_request
from accounts.serializers import (
    AuthPayloadSerializer,
    LoginSerializer,
    SignupSerializer,
    UserOutputSerializer
)
from accounts.services import AccountService


class SignupAPIView(APIView):
    """
    POST: Create an account and return a bearer token

    Request body:
    - first_name, last_name: string (required)
    - email: string (required, unique)
    - password: string (required)
    """

    @extend_schema(
        tags=["Auth"],
        summary="Sign up",
        request=SignupSerializer,
        responses={201: AuthPayloadSerializer, 409: OpenApiResponse(description="Email already used")},
    )
    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        token, user = AccountService.signup(**serializer.validated_data)

        output = AuthPayloadSerializer({'token': token, 'user': user})
        return Response(output.data, status=status.HTTP_201_CREATED)


class LoginAPIView(APIView):

    @extend_schema(
        tags=["Auth"],
        summary="Log in",
        request=LoginSerializer,
        responses={200: AuthPayloadSerializer, 401: OpenApiResponse(description="Invalid credentials")},
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        token, user = AccountService.login(**serializer.validated_data)

        output = AuthPayloadSerializer({'token': token, 'user': user})
        return Response(output.data)


class MeAPIView(APIView):

    @extend_schema(tags=["Auth"], summary="Current user", responses={200: UserOutputSerializer})
    def get(self, request):
        user = AccountService.me(user=caller_from_request(request))
        return Response(UserOutputSerializer(user).data)
