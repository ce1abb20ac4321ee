AVATAR_SIZE = "60x60"
SCOPE_SEPARATOR = ","
AUTHORIZATION_CODE = "authorization_code"
