# users/forms.py
from django import forms
from django.contrib.auth.forms import AuthenticationForm
from django.contrib.auth.password_validation import validate_password
from .models import CustomUser


class RegisterForm(forms.ModelForm):
    password1 = forms.CharField(
        label="Password",
        strip=False,
        widget=forms.PasswordInput(attrs={"class": "form-control", "autocomplete": "new-password"}),
    )
    password2 = forms.CharField(
        label="Confirm password",
        strip=False,
        widget=forms.PasswordInput(attrs={"class": "form-control", "autocomplete": "new-password"}),
    )

    class Meta:
        model = CustomUser
        fields = ("email", "full_name")
        labels = {"full_name": "Full name"}
        widgets = {
            "email": forms.EmailInput(attrs={"class": "form-control", "autocomplete": "email"}),
            "full_name": forms.TextInput(attrs={"class": "form-control", "autocomplete": "name"}),
        }

    def clean_email(self):
        return self.cleaned_data["email"].strip().lower()

    def clean_password2(self):
        password1 = self.cleaned_data.get("password1")
        password2 = self.cleaned_data.get("password2")
        if password1 and password2 and password1 != password2:
            raise forms.ValidationError("Passwords do not match")
        if password2:
            validate_password(password2, self.instance)
        return password2

    def save(self, commit=True):
        investor = super().save(commit=False)
        investor.set_password(self.cleaned_data["password1"])
        if commit:
            investor.save()
        return investor


class LoginForm(AuthenticationForm):
    """Sign in with email; the username field of the auth backend is email."""

    username = forms.EmailField(
        label="Email", widget=forms.EmailInput(attrs={"class": "form-control", "autofocus": True})
    )
    password = forms.CharField(
        label="Password",
        strip=False,
        widget=forms.PasswordInput(attrs={"class": "form-control", "autocomplete": "current-password"}),
    )


class ProfileEditForm(forms.ModelForm):
    class Meta:
        model = CustomUser
        fields = ["full_name"]
        labels = {"full_name": "Display name"}
        widgets = {"full_name": forms.TextInput(attrs={"class": "form-control"})}


class TermsForm(forms.Form):
    risk_accepted = forms.BooleanField(
        label="I understand that I could lose my entire investment",
        error_messages={"required": "You must acknowledge the risk"},
    )
    terms_accepted = forms.BooleanField(
        label="I agree to the Terms of Use and Risk Disclosure",
        error_messages={"required": "You must accept the terms"},
    )
