#This file is for development purposes only
#Reads JIRA_BASE, JIRA_EMAIL, JIRA_API_TOKEN and PROJECT_KEY from the environment or a .env file

from ticket_proxy_service import run


if __name__ == "__main__":
    run()
