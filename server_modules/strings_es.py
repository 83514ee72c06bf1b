# --- Configuration Loading ---
LOG_DOTENV_LOADED = "Archivo .env cargado"
LOG_SERVER_LANGUAGE = "Idioma del servidor configurado: {language}"

# --- TLS Material ---
LOG_READING_PEM = "Leyendo {kind} desde {path}"
LOG_PEM_READ = "Leídos {size} bytes de {kind} desde {path}"
ERROR_PEM_READ_FAILED = "No se pudo leer el archivo de {kind} '{path}': {error}"
ERROR_KEY_INVALID = "La clave privada no es PEM válido: {error}"
ERROR_CERT_INVALID = "El certificado no es PEM válido: {error}"
ERROR_KEY_CERT_MISMATCH = "La clave privada no corresponde a la clave pública del certificado"
ERROR_TLS_CONTEXT_FAILED = "No se pudo cargar el par clave/certificado en un contexto TLS: {error}"
LOG_TLS_CONTEXT_READY = "Contexto TLS creado para el certificado con sujeto: {subject}"

# --- Certificados autofirmados ---
LOG_SELF_SIGNED_GENERATED = "Certificado autofirmado generado para {common_name} válido por {days} días"
LOG_SELF_SIGNED_WRITTEN = "Escrito {path}"
ERROR_SELF_SIGNED_EXISTS = "No se sobrescribe el archivo existente '{path}' (use --force)"

# --- Servidor ---
LOG_BINDING = "Enlazando el socket TLS en {host}:{port}"
ERROR_BIND_FAILED = "No se pudo enlazar {host}:{port}: {error}"
ERROR_PORT_IN_USE = "El puerto {port} ya está en uso por otro proceso"
LOG_SERVER_LISTENING = "El servidor está funcionando en https://{host}:{port}"
LOG_SERVER_STOPPED = "Servidor detenido"

# --- Arranque ---
FATAL_STARTUP_FAILED = "FATAL: Falló el arranque del servidor: {error}"
FATAL_UNEXPECTED_STARTUP_ERROR = "FATAL: Error inesperado durante el arranque: {error}"
LOG_CERT_PATH_CHECKED = "Ruta del certificado comprobada: {path}"
LOG_KEY_PATH_CHECKED = "Ruta de la clave comprobada: {path}"
