from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserChangeForm as BaseUserChangeForm
from django.contrib.auth.forms import UserCreationForm as BaseUserCreationForm
from django.utils.translation import gettext_lazy as _
from .models import User, Leave


class UserCreationForm(BaseUserCreationForm):
    class Meta(BaseUserCreationForm.Meta):
        model = User
        fields = ('username',)


class UserChangeForm(BaseUserChangeForm):
    class Meta(BaseUserChangeForm.Meta):
        model = User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for custom User model"""

    form = UserChangeForm
    add_form = UserCreationForm

    list_display = ['username', 'email', 'is_super_user', 'is_active', 'is_staff', 'date_joined']
    list_filter = ['is_super_user', 'is_active', 'is_staff', 'date_joined']
    search_fields = ['username', 'email', 'first_name', 'last_name']
    ordering = ['username']

    fieldsets = (
        (None, {'fields': ('username', 'password')}),
        (_('Personal info'), {'fields': ('first_name', 'last_name', 'email')}),
        (_('Claims'), {'fields': ('is_super_user',)}),
        (_('Permissions'), {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        (_('Important dates'), {'fields': ('last_login', 'date_joined')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('username', 'password1', 'password2', 'is_super_user'),
        }),
    )


@admin.register(Leave)
class LeaveAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'from_date', 'to_date', 'means', 'status', 'responded_by', 'date_created']
    list_filter = ['status', 'means']
    search_fields = ['user', 'justification']
    readonly_fields = ['date_created', 'responded_at']
    ordering = ['-date_created']
