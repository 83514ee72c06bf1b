# --- Configuration Loading ---
LOG_DOTENV_LOADED = ".env file loaded"
LOG_SERVER_LANGUAGE = "Server language set to: {language}"

# --- TLS Material ---
LOG_READING_PEM = "Reading {kind} from {path}"
LOG_PEM_READ = "Read {size} bytes of {kind} from {path}"
ERROR_PEM_READ_FAILED = "Could not read {kind} file '{path}': {error}"
ERROR_KEY_INVALID = "The private key is not valid PEM: {error}"
ERROR_CERT_INVALID = "The certificate is not valid PEM: {error}"
ERROR_KEY_CERT_MISMATCH = "The private key does not match the certificate's public key"
ERROR_TLS_CONTEXT_FAILED = "Could not load the key/certificate pair into a TLS context: {error}"
LOG_TLS_CONTEXT_READY = "TLS context created for certificate subject: {subject}"

# --- Self-signed Material ---
LOG_SELF_SIGNED_GENERATED = "Generated self-signed certificate for {common_name} valid for {days} days"
LOG_SELF_SIGNED_WRITTEN = "Wrote {path}"
ERROR_SELF_SIGNED_EXISTS = "Refusing to overwrite existing file '{path}' (use --force)"

# --- Server ---
LOG_BINDING = "Binding TLS listener on {host}:{port}"
ERROR_BIND_FAILED = "Could not bind {host}:{port}: {error}"
ERROR_PORT_IN_USE = "Port {port} is already in use by another process"
LOG_SERVER_LISTENING = "Server is running at https://{host}:{port}"
LOG_SERVER_STOPPED = "Server stopped"

# --- Startup ---
FATAL_STARTUP_FAILED = "FATAL: Server startup failed: {error}"
FATAL_UNEXPECTED_STARTUP_ERROR = "FATAL: Unexpected error during startup: {error}"
LOG_CERT_PATH_CHECKED = "Certificate path checked: {path}"
LOG_KEY_PATH_CHECKED = "Key path checked: {path}"
