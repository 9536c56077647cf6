# ABOUTME: Allows running the service with "python -m cep_weather".
# ABOUTME: Delegates to cep_weather.server.main.

from cep_weather.server import main

main()
