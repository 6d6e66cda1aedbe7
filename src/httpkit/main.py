import json

from httpkit.api.http_client import HttpClient
from httpkit.commands.submission import SubmissionCommand
from httpkit.config import Config, setup_logging
from httpkit.services.submission_service import SubmissionService


def main():
    setup_logging()

    with HttpClient(Config.BASE_URL) as client:
        service = SubmissionService(client, Config.ENDPOINT)
        try:
            token = service.request_token()
            print(f"Bearer Token Retrieved: {token}")
            service.authorize(token)

            command = SubmissionCommand(
                name=Config.SUBMISSION_NAME,
                email=Config.SUBMISSION_EMAIL,
                url=Config.SUBMISSION_URL,
            )
            response = service.submit(command)
            print("Submission Response: " + json.dumps(response, indent=4))
        except Exception as e:
            print(f"Error: {e}")


if __name__ == "__main__":
    main()
