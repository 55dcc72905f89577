import uvicorn

import config


def main():
    uvicorn.run("voice_control.api_server:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
