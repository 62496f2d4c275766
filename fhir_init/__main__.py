from fhir_init.main import run

run()
