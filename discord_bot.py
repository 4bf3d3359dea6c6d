import os
import discord
from dotenv import load_dotenv
from news_query import NewsClient, ParameterError, NewsQueryError

# .env 파일에서 환경 변수를 로드합니다.
load_dotenv()

# .env 파일에 DISCORD_BOT_TOKEN="..." 과 NEWS_API_KEY="..." 형식으로 저장해야 합니다.
TOKEN = os.getenv("DISCORD_BOT_TOKEN")
NEWS_API_KEY = os.getenv("NEWS_API_KEY")

DISCORD_LIMIT = 2000

# Discord 클라이언트에 필요한 인텐트를 설정합니다.
intents = discord.Intents.default()
intents.message_content = True  # 메시지 내용을 읽기 위한 권한

client = discord.Client(intents=intents)
news = NewsClient(NEWS_API_KEY)


def format_articles(title, results):
    """검색 결과를 Discord 메시지 형식으로 만듭니다."""
    if not results.articles:
        return "새로운 뉴스를 찾을 수 없습니다."

    response = f"📰 {title}\n\n"
    for article in results.articles:
        response += f"**{article.title}**\n"
        response += f"*{article.source.name} - {article.published_at or '날짜 없음'}*\n"
        response += f"<{article.url}>\n\n"

    # 메시지가 2000자를 초과하지 않도록 합니다.
    if len(response) > DISCORD_LIMIT:
        response = response[:DISCORD_LIMIT - 3] + "..."
    return response


@client.event
async def on_ready():
    """봇이 성공적으로 로그인하면 호출됩니다."""
    print(f'{client.user}으로 성공적으로 로그인했습니다!')


@client.event
async def on_message(message):
    """사용자가 메시지를 보낼 때마다 호출됩니다."""
    # 봇 자신의 메시지는 무시합니다.
    if message.author == client.user:
        return

    content = message.content.strip()

    try:
        # '!headlines [국가코드]' 명령어: 국가별 주요 뉴스 3개
        if content.startswith('!headlines'):
            parts = content.split()
            country = parts[1] if len(parts) > 1 else "us"
            results = news.top_headlines(country=country, pageSize=3)
            await message.channel.send(format_articles(f"{country} 주요 뉴스", results))

        # '!search <검색어>' 명령어: 최신순 검색 결과 3개
        elif content.startswith('!search'):
            query = content[len('!search'):].strip()
            results = news.everything(q=query, sortBy="publishedAt", pageSize=3)
            await message.channel.send(format_articles(f"'{query}' 검색 결과", results))

    except ParameterError as e:
        # 잘못된 국가 코드, 빈 검색어 등은 사용자에게 그대로 알려줍니다.
        await message.channel.send(f"요청을 처리할 수 없습니다: {e}")
    except NewsQueryError as e:
        print(f"뉴스 가져오기 오류: {e}")
        await message.channel.send("뉴스를 가져오는 중에 오류가 발생했습니다.")


if __name__ == "__main__":
    if not TOKEN:
        raise ValueError("DISCORD_BOT_TOKEN 환경 변수가 설정되지 않았습니다. .env 파일을 확인하세요.")
    # 봇을 실행합니다.
    client.run(TOKEN)
