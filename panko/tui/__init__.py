"""Actions that an interactive session browser can request."""