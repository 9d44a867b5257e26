ENGINE = {
    "url": "http://localhost:8080/engine-rest",
}
LOG_LEVEL = "INFO"
